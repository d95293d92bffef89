"""Protocol for observing search progress."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gauge_finder.domain.models.search_outcome import SearchState


class SearchListenerProtocol(Protocol):
    """Protocol for views that want to follow a search through its states."""

    def __call__(self, term: str, state: "SearchState") -> None:
        """Receive a state transition.

        Args:
            term: The trimmed search term.
            state: The state just entered.
        """
        ...
