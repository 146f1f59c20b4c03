"""IdGenerator + AppConfig 单元测试

验证 ID 生成方式、环境变量映射、默认值。
"""

import pytest
from pydantic import ValidationError
from taskapi.core.config import AppConfig, load_app_config
from taskapi.core.exceptions import ConfigError
from taskapi.core.ids import (
    SequentialIdGenerator,
    UlidIdGenerator,
    build_id_generator,
)
from taskapi.core.store import InMemoryTaskStore, create_task_store

ENV_VARS = [
    "TASKAPI_APP_NAME",
    "TASKAPI_VERSION",
    "TASKAPI_HOST",
    "TASKAPI_PORT",
    "TASKAPI_ID_SCHEME",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestIdGenerators:
    def test_ulid_ids_are_unique(self):
        gen = UlidIdGenerator()
        ids = {gen.new_id() for _ in range(100)}
        assert len(ids) == 100
        assert all(len(i) == 26 for i in ids)

    def test_sequential_ids(self):
        gen = SequentialIdGenerator()
        assert [gen.new_id() for _ in range(3)] == ["task-1", "task-2", "task-3"]

    def test_sequential_custom_prefix_and_start(self):
        gen = SequentialIdGenerator(prefix="t", start=10)
        assert gen.new_id() == "t10"

    def test_build_by_scheme(self):
        assert isinstance(build_id_generator("ulid"), UlidIdGenerator)
        assert isinstance(build_id_generator("sequential"), SequentialIdGenerator)

    def test_unknown_scheme_rejected(self):
        with pytest.raises(ConfigError, match="Unknown id scheme"):
            build_id_generator("uuid7")


class TestAppConfig:
    def test_default_values(self):
        config = AppConfig()
        assert config.app_name == "Task Management API"
        assert config.version == "1.0.0"
        assert config.host == "0.0.0.0"
        assert config.port == 3000
        assert config.id_scheme == "ulid"

    def test_port_range(self):
        with pytest.raises(ValidationError):
            AppConfig(port=0)
        with pytest.raises(ValidationError):
            AppConfig(port=70000)

    def test_unknown_id_scheme_fails_at_store_creation(self):
        config = AppConfig(id_scheme="random")

        with pytest.raises(ConfigError, match="Unknown id scheme"):
            create_task_store(config)


class TestLoadAppConfig:
    def test_default_when_no_env(self, clean_env):
        assert load_app_config() == AppConfig()

    def test_all_env_vars(self, clean_env):
        clean_env.setenv("TASKAPI_APP_NAME", "Tasks")
        clean_env.setenv("TASKAPI_VERSION", "2.0.0")
        clean_env.setenv("TASKAPI_HOST", "127.0.0.1")
        clean_env.setenv("TASKAPI_PORT", "8080")
        clean_env.setenv("TASKAPI_ID_SCHEME", "sequential")

        config = load_app_config()

        assert config.app_name == "Tasks"
        assert config.version == "2.0.0"
        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.id_scheme == "sequential"

    def test_invalid_port_uses_default(self, clean_env):
        """无效端口不阻塞启动，使用默认值"""
        clean_env.setenv("TASKAPI_PORT", "not-a-number")

        assert load_app_config().port == 3000

    @pytest.mark.parametrize("value", ["0", "-1", "65536", "70000"])
    def test_out_of_range_port_uses_default(self, clean_env, value):
        """越界端口同样回退默认值，不抛 ValidationError"""
        clean_env.setenv("TASKAPI_PORT", value)

        assert load_app_config().port == 3000

    def test_unknown_id_scheme_raises_config_error(self, clean_env):
        clean_env.setenv("TASKAPI_ID_SCHEME", "uuid7")

        config = load_app_config()

        assert config.id_scheme == "uuid7"
        with pytest.raises(ConfigError, match="Unknown id scheme"):
            create_task_store(config)


class TestCreateTaskStore:
    async def test_store_uses_configured_scheme(self):
        from taskapi.core.models import TaskCreate

        store = create_task_store(AppConfig(id_scheme="sequential"))
        task = await store.create_task(TaskCreate(title="t"))

        assert isinstance(store, InMemoryTaskStore)
        assert task.id == "task-1"
