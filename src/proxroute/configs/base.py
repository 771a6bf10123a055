"""Search configuration for proximity shortest-path runs."""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Union

from ..core.vertex import DEFAULT_THRESHOLD

OUTPUT_FORMATS = ('text', 'tsv')


@dataclass
class SearchConfig:
    """Settings for one shortest-path run.

    ``origin`` is either an index into the input vertices or the name of
    a vertex; the first vertex with that name is used.
    """
    threshold: float = DEFAULT_THRESHOLD
    origin: Union[int, str] = 0
    output_format: str = 'text'
    show_progress: bool = False

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Build a config from a mapping, rejecting unknown keys."""
        unknown = sorted(set(data) - set(cls.field_names()))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> List[str]:
        """Check settings and return a list of problems (empty if valid)."""
        errors = []

        if isinstance(self.threshold, bool) or not isinstance(self.threshold, (int, float)):
            errors.append(f"threshold must be a number, got {self.threshold!r}")
        elif not math.isfinite(self.threshold) or self.threshold < 0:
            errors.append(f"threshold must be finite and non-negative, got {self.threshold}")

        if isinstance(self.origin, bool) or not isinstance(self.origin, (int, str)):
            errors.append(f"origin must be a vertex index or name, got {self.origin!r}")
        elif isinstance(self.origin, int) and self.origin < 0:
            errors.append(f"origin index must be non-negative, got {self.origin}")
        elif isinstance(self.origin, str) and not self.origin.strip():
            errors.append("origin name must not be empty")

        if self.output_format not in OUTPUT_FORMATS:
            errors.append(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                          f"got {self.output_format!r}")

        if not isinstance(self.show_progress, bool):
            errors.append(f"show_progress must be true or false, got {self.show_progress!r}")

        return errors
