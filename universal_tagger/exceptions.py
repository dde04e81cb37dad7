"""
Exceptions raised by universal-tagger.

Engine invariants (classification exhaustion, impossible run shapes) are
reported as InternalConsistencyError subclasses: they indicate a bug or a
segmenter that broke its contract, never bad user input.
"""


class UniversalTaggerError(Exception):
    """Base class for all universal-tagger errors."""
    pass


class InternalConsistencyError(UniversalTaggerError):
    """Raised when an engine invariant does not hold."""
    pass


class ClassificationError(InternalConsistencyError):
    """Raised when a segment matches none of the token categories."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"possibly missing category for segment {text!r}")


class PositionRunError(InternalConsistencyError):
    """
    Raised when two merge-eligible tokens carry positions that cannot follow
    each other inside a run (e.g. First followed by Only).
    """

    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"impossible run transition {first.position.value} -> "
            f"{second.position.value}: ({first!r}, {second!r})"
        )


class SpanAdjacencyError(UniversalTaggerError, ValueError):
    """Raised when joining spans that are not contiguous views of one text."""
    pass


class DetectorConfigurationError(UniversalTaggerError, ValueError):
    """Raised when a language detector has fewer than two candidates."""
    pass


class ConfigError(UniversalTaggerError):
    """Raised when a configuration file cannot be read or validated."""
    pass
