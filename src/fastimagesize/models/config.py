"""Detection configuration."""
from __future__ import annotations

from pydantic import BaseModel, Field

# Worst-case span a JPEG marker scan may need before reaching the SOF segment
JPEG_MAX_HEADER_SIZE = 786432


class ImageSizeConfig(BaseModel):
    """Main detection configuration."""

    # Caching
    use_cache: bool = True

    # Bytes fetched per detection attempt
    header_budget: int = Field(default=JPEG_MAX_HEADER_SIZE, gt=0)

    # Remote transport
    timeout_seconds: float = 30.0
    follow_redirects: bool = True
    user_agent: str | None = None

    # Concurrent batches
    max_workers: int = Field(default=8, ge=1)

    # Plugin options
    disabled_probes: list[str] = Field(default_factory=list)

    @property
    def range_header(self) -> str:
        """Range header covering the whole header budget."""
        return f"bytes=0-{self.header_budget - 1}"
