"""Task Domain Model

Task 是唯一的领域实体。id 与时间戳由 Store 分配，调用方只提供
title / description / completed。
对外 JSON 使用 camelCase 字段名（createdAt / updatedAt）。
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Task(BaseModel):
    """Task 数据模型

    frozen：更新通过 model_copy 生成新实例，id / created_at 不可变。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(description="唯一标识，由 IdGenerator 生成")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述")
    completed: bool = Field(default=False, description="是否完成")
    created_at: datetime = Field(description="创建时间")
    updated_at: datetime = Field(description="最后修改时间")


class TaskCreate(BaseModel):
    """创建任务输入"""

    model_config = ConfigDict(strict=True, extra="ignore")

    title: str = Field(min_length=1, description="任务标题（必填，非空）")
    description: str = Field(default="", description="任务描述，缺省为空字符串")

    @field_validator("description", mode="before")
    @classmethod
    def _null_description_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class TaskUpdate(BaseModel):
    """部分更新输入

    只有调用方显式提供且非 null 的字段才会覆盖原值；
    false / "" 属于显式提供，会覆盖。
    title 在更新时不做非空校验。
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    title: str | None = Field(default=None, description="新标题")
    description: str | None = Field(default=None, description="新描述")
    completed: bool | None = Field(default=None, description="新完成状态")

    def changes(self) -> dict[str, Any]:
        """返回需要合并到 Task 的字段（按字段名）"""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }
