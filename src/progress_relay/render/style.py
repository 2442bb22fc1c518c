"""Display modes for progress renderers."""

from enum import Enum


class Style(Enum):
    """How a renderer labels the amount of work done."""

    BYTES = "bytes"
    LEN = "len"

    @classmethod
    def default(cls) -> "Style":
        return cls.LEN

    @classmethod
    def parse(cls, name: str) -> "Style":
        """Look up a style by case-insensitive name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(style.value for style in cls)
            raise ValueError(f"Unknown style '{name}'. Expected one of: {choices}") from None

    def template_str(self) -> str:
        """Counter template; placeholders are filled in by the renderer."""
        return _TEMPLATES[self]


_TEMPLATES = {
    Style.BYTES: "{bytes}/{total_bytes}",
    Style.LEN: "{pos}/{len}",
}
