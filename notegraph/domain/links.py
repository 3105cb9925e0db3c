"""Link graph domain models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Reference(BaseModel):
    """A single [[target]] or [[target|display]] occurrence in a note.

    Attributes:
        target: Trimmed text before the optional pipe
        display: Trimmed text after the pipe, if present
        offset: Byte position of the opening brackets in the UTF-8 source text
    """

    model_config = ConfigDict(frozen=True)

    target: str
    display: str | None = None
    offset: int


ForwardIndex = dict[Path, list[Reference]]
BackwardIndex = dict[Path, list[Path]]
BrokenLinkReport = dict[Path, list[str]]


class GraphStats(BaseModel):
    """Summary counts for a built link graph."""

    num_documents: int
    num_references: int
    num_resolved_targets: int
    num_broken_references: int


class LinkGraph(BaseModel):
    """Forward, backward and broken-link indices computed in one pass."""

    forward: ForwardIndex = {}
    backward: BackwardIndex = {}
    broken: BrokenLinkReport = {}

    def backlinks_for(self, path: Path) -> list[Path]:
        """Get the sources that link to ``path``."""
        return list(self.backward.get(Path(path), []))

    def stats(self) -> GraphStats:
        return GraphStats(
            num_documents=len(self.forward),
            num_references=sum(len(refs) for refs in self.forward.values()),
            num_resolved_targets=len(self.backward),
            num_broken_references=sum(len(targets) for targets in self.broken.values()),
        )
