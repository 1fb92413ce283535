import os

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "SPLITFILE_"
DEFAULT_CHUNK_SIZE = 1024 * 1024


class SplitFileSettings(BaseModel):
    """
    Runtime tuning shared by splitter and merger.

    Attributes:
        chunk_size: Bytes moved per read/write (or per sendfile call).
        max_workers: Upper bound on concurrent copy tasks. ``None`` lets
            ``ThreadPoolExecutor`` pick its default.
        use_sendfile: Use ``os.sendfile`` when the platform supports it.
    """

    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    max_workers: int | None = Field(default=None, ge=1)
    use_sendfile: bool = True

    @classmethod
    def from_env(cls, **overrides) -> "SplitFileSettings":
        """
        Build settings from ``SPLITFILE_*`` environment variables.
        Explicit keyword overrides win over the environment.
        """
        values = {}
        for field_name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw != "":
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


__all__ = ["SplitFileSettings", "DEFAULT_CHUNK_SIZE"]
