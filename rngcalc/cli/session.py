"""
Form state for the calculator front end.

Holds the four text fields and the last result; a result is only produced
by an explicit submit, which replaces the previous one wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from rngcalc.analysis.calculator import RawInput, Result, compute, fish_label


@dataclass(frozen=True)
class FormState:
    """Current text of the form fields."""
    fish_name: str = ""
    base_denominator: str = ""
    total_luck: str = ""
    total_caught: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def update(self, field_name: str, value: str) -> FormState:
        """
        Return a copy with one field changed.

        Raises:
            KeyError: If field_name is not a form field
        """
        if field_name not in self.field_names():
            available = ', '.join(self.field_names())
            raise KeyError(f"Unknown form field '{field_name}'. Available: {available}")
        return replace(self, **{field_name: value})

    def to_raw_input(self) -> RawInput:
        return RawInput(
            fish_name=self.fish_name,
            base_denominator=self.base_denominator,
            total_luck=self.total_luck,
            total_caught=self.total_caught,
        )


class CalculatorSession:
    """Form snapshot plus the result of the last submit."""

    def __init__(self, form: FormState | None = None):
        self.form = form if form is not None else FormState()
        self.result: Result | None = None

    def set_field(self, field_name: str, value: str) -> None:
        self.form = self.form.update(field_name, value)

    def submit(self) -> Result:
        """Recompute from the current form and replace the last result."""
        self.result = compute(self.form.to_raw_input())
        return self.result

    @property
    def fish_label(self) -> str:
        return fish_label(self.form.fish_name)
