"""Per-call bookkeeping of which interfaces are reachable from a response."""

from dataclasses import dataclass, field


@dataclass
class ReachabilityContext:
    """Response-reachability record for one ``transform()`` call.

    ``direct`` holds the rendered 200-response types, filled by the extractor.
    ``deep`` holds interface names whose properties must all be required,
    filled by the interface and property builders.
    """

    direct: set[str] = field(default_factory=set)
    deep: set[str] = field(default_factory=set)

    def record_response(self, type_text: str) -> None:
        if type_text:
            self.direct.add(type_text)

    def is_response_type(self, name: str) -> bool:
        return name in self.direct

    def mark_deep(self, name: str) -> None:
        self.deep.add(name)
