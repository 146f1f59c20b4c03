"""TaskAPI 异常体系

资源不存在不是异常：Store 以 None / False 返回值表达。
"""


class TaskApiError(Exception):
    """TaskAPI 基础异常"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskApiError):
    """请求输入不合法（映射为 HTTP 400）"""

    def __init__(self, message: str, field: str | None = None) -> None:
        """
        Args:
            message: 返回给客户端的错误描述
            field: 触发错误的字段名（如果能定位）
        """
        super().__init__(message)
        self.field = field


class ConfigError(TaskApiError):
    """启动配置不合法"""
