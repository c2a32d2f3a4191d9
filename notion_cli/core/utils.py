"""Utility functions for notion CLI."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from .errors import InvalidInput
from .formatter import DEFAULT_FORMAT, get_encoder

__all__ = ["CommandContext", "parse_json_option"]


@dataclass
class CommandContext:
    """Per-invocation settings handed to every command handler."""

    output_format: str = DEFAULT_FORMAT
    stream: TextIO | None = None

    @property
    def encoder(self) -> Callable[[Any], str]:
        return get_encoder(self.output_format)

    def emit(self, document: Any) -> None:
        """Encode *document* in the selected format and write it to stdout."""
        print(self.encoder(document), file=self.stream or sys.stdout)


def parse_json_option(value: str | None, label: str) -> Any:
    """Parse a JSON command-line option; ``None`` passes through.

    *label* names the option in the error, e.g. ``"filter"``.
    """
    if value is None:
        return None
    try:
        return json.loads(value)
    except ValueError as e:
        raise InvalidInput(
            f"Invalid {label} JSON",
            hint=f"{label.capitalize()} must be valid JSON ({e})",
        ) from e
