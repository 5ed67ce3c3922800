from path_helper.domain.models import (
    DEFAULT_VARIABLES,
    FragmentFile,
    PathVariable,
    ShellStyle,
)

__all__ = [
    "DEFAULT_VARIABLES",
    "FragmentFile",
    "PathVariable",
    "ShellStyle",
]
