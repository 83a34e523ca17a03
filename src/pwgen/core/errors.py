class PwgenError(Exception):
    """Base class for fatal configuration and generation errors."""


class UnknownSymbolSetError(PwgenError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such symbol set: {name}")


class PoolGrowthError(PwgenError):
    def __init__(self, requested: int):
        self.requested = requested
        super().__init__("memory allocation failed")


class EmptyPoolError(PwgenError):
    def __init__(self) -> None:
        super().__init__("active symbol pool is empty")


class PoolTooLargeError(PwgenError):
    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"symbol pool has {count} characters, at most {limit} supported"
        )
