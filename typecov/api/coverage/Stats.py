"""Statistics record for known/total type positions."""

from dataclasses import dataclass


@dataclass
class Stats:
    """Known and total counts for one accounting scope.

    ``percentage`` is only meaningful after ``done()`` has been called.
    """

    known_count: int = 0
    total_count: int = 0
    percentage: float = 100.0

    def gap(self) -> int:
        return self.total_count - self.known_count

    def done(self) -> None:
        """Compute the final percentage from the accumulated counts."""
        if self.total_count == 0:
            self.percentage = 100.0
        else:
            self.percentage = 100 * self.known_count / self.total_count

    def add(self, other: "Stats") -> None:
        self.known_count += other.known_count
        self.total_count += other.total_count
