from dataclasses import dataclass


@dataclass(frozen=True)
class DiffReport:
    """Difference between a reference and a candidate attribute set.

    ``delta`` is computed from the sizes of the two deduplicated sets, not from
    raw attribute occurrence counts, so it need not equal
    ``len(new_values) - len(missing_values)``.
    """

    delta: int
    new_values: frozenset
    missing_values: frozenset

    @property
    def is_identical(self) -> bool:
        return self.delta == 0 and not self.new_values and not self.missing_values


def compare(reference, candidate) -> DiffReport:
    """Compares two collections of attribute values, candidate relative to reference."""
    reference = frozenset(reference)
    candidate = frozenset(candidate)

    return DiffReport(
        delta=len(candidate) - len(reference),
        new_values=candidate - reference,
        missing_values=reference - candidate,
    )
