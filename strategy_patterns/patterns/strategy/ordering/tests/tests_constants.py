from pathlib import Path

__all__ = [
    "SORTED_DATA",
    "UNSORTED_DATA",
    "ORDERING_CASES",
    "SHIPPED_CONFIGURATION",
]

SORTED_DATA: list[str] = ["a", "b", "c", "d", "e"]
UNSORTED_DATA: list[str] = ["d", "b", "e", "a", "c"]

# (case name, input, expected sort, expected reverse)
ORDERING_CASES: list[tuple[str, list[str], list[str], list[str]]] = [
    ("sorted_input", SORTED_DATA,
     ["a", "b", "c", "d", "e"], ["e", "d", "c", "b", "a"]),
    ("unsorted_input", UNSORTED_DATA,
     ["a", "b", "c", "d", "e"], ["c", "a", "e", "b", "d"]),
    ("empty_input", [], [], []),
    ("single_element", ["x"], ["x"], ["x"]),
    ("duplicates", ["b", "a", "b"], ["a", "b", "b"], ["b", "a", "b"]),
    ("case_sensitive", ["b", "B", "a"], ["B", "a", "b"], ["a", "B", "b"]),
]

SHIPPED_CONFIGURATION: Path = (
    Path(__file__).parent.parent / "configuration" / "ordering.yaml"
)
