# ============================================================================
# CLAUDE CONTEXT - VIEW CONTROLLER BASE
# ============================================================================
# STATUS: Console - shared state and mutation contract for both views
# PURPOSE: Own a fetched collection, fence stale fetches, run mutations
# EXPORTS: AssetViewController, link_views
# DEPENDENCIES: console.api_client, services.reconciliation, services.record_normalizer
# ============================================================================
"""
View Controller Base.

Each controller owns the last fetched collection, a loading flag, the last
error message, the search text and the current page. State machine:

    IDLE -> LOADING -> READY | ERROR
    READY | ERROR -> LOADING  (every refresh or mutation)

Mutation contract (create / update / delete / restore):
    1. Call the Lifecycle API.
    2. Success: refresh own collection, then the partner's.
    3. Failure: alert once with the single-line message; no refresh; the
       previous collection stays displayed.

Every failure ends in ERROR with loading cleared. Unexpected ones (a raising
supplementary source, a malformed record) show the generic message of the
operation.

Fetches are fenced: every refresh takes the next sequence number and a
response whose number is no longer the latest is discarded.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from config.defaults import ConsoleDefaults
from core.models import ProcessedAsset, ViewState
from core.schema import DisplayColumn
from exceptions import ApiRequestError, NetworkFailureError
from services.reconciliation import PageResult, reconcile
from services.record_normalizer import display_value, normalize_many
from util_logger import LoggerFactory, ComponentType
from .api_client import LOAD_FAILED, GridAssetApiClient

ConfirmHook = Callable[[str], bool]
AlertHook = Callable[[str], None]

# Failures a controller turns into a user-facing line
CONSOLE_FAILURES = (ApiRequestError, NetworkFailureError)


class AssetViewController(ABC):
    """
    Base controller for one console view.

    Subclasses declare `columns` and implement `fetch()` and `select()`.
    `confirm` and `alert` stand in for the UI dialogs; by default every
    confirmation is accepted and alerts are only logged.
    """

    columns: Tuple[DisplayColumn, ...] = ()

    def __init__(
        self,
        client: GridAssetApiClient,
        page_size: int = ConsoleDefaults.PAGE_SIZE,
        confirm: Optional[ConfirmHook] = None,
        alert: Optional[AlertHook] = None
    ):
        self.client = client
        self.page_size = page_size
        self.logger = LoggerFactory.create_logger(ComponentType.CONSOLE, self.__class__.__name__)

        self.assets: List[ProcessedAsset] = []
        self.loading = False
        self.error = ""
        self.search_text = ""
        self.page = 1
        self.state = ViewState.IDLE
        self.form_errors: Dict[str, str] = {}
        self.partner: Optional["AssetViewController"] = None

        self._sequence = 0
        self._confirm = confirm or (lambda message: True)
        self._alert = alert or self._log_alert

    def _log_alert(self, message: str) -> None:
        self.logger.warning(f"⚠️ {message}")

    # ========================================================================
    # SUBCLASS HOOKS
    # ========================================================================

    @abstractmethod
    def fetch(self) -> Iterable[Mapping[str, Any]]:
        """Fetch raw records for this view (one API round trip)."""
        pass

    @abstractmethod
    def select(self, asset: ProcessedAsset) -> bool:
        """True if the asset belongs in this view."""
        pass

    # ========================================================================
    # REFRESH WITH FENCING
    # ========================================================================

    def begin_refresh(self) -> int:
        """Enter LOADING and issue the next sequence number."""
        self._sequence += 1
        self.loading = True
        self.state = ViewState.LOADING
        return self._sequence

    def is_latest(self, sequence: int) -> bool:
        return sequence == self._sequence

    def complete_refresh(self, sequence: int, records: Iterable[Mapping[str, Any]]) -> bool:
        """
        Apply a fetched collection.

        Returns False (and changes nothing) if a newer refresh was issued
        after this one.
        """
        if not self.is_latest(sequence):
            self.logger.debug(f"Discarding stale response #{sequence} (latest #{self._sequence})")
            return False
        self.assets = [asset for asset in normalize_many(records) if self.select(asset)]
        self.loading = False
        self.error = ""
        self.state = ViewState.READY
        return True

    def fail_refresh(self, sequence: int, message: str) -> bool:
        """Record a fetch failure; the previous collection stays in place."""
        if not self.is_latest(sequence):
            self.logger.debug(f"Discarding stale failure #{sequence} (latest #{self._sequence})")
            return False
        self.loading = False
        self.error = message
        self.state = ViewState.ERROR
        return True

    def refresh(self) -> bool:
        """Fetch and apply. Returns True if this call's result was applied."""
        sequence = self.begin_refresh()
        try:
            return self.complete_refresh(sequence, list(self.fetch()))
        except CONSOLE_FAILURES as e:
            self.logger.warning(f"❌ Refresh failed: {e}")
            self.fail_refresh(sequence, str(e))
            return False
        except Exception as e:
            # a supplementary source or a malformed record
            self.logger.error(f"❌ Refresh failed: {type(e).__name__}: {e}")
            self.fail_refresh(sequence, LOAD_FAILED)
            return False

    # ========================================================================
    # MUTATIONS
    # ========================================================================

    @property
    def controls_enabled(self) -> bool:
        """Advisory: triggering controls are disabled while loading."""
        return not self.loading

    def confirm(self, message: str) -> bool:
        return bool(self._confirm(message))

    def alert(self, message: str) -> None:
        self._alert(message)

    def _fail_mutation(self, message: str) -> bool:
        self.loading = False
        self.error = message
        self.state = ViewState.ERROR
        self.alert(message)
        return False

    def _mutate(self, operation: str, action: Callable[[], Any], failure_message: str) -> bool:
        """
        Run one Lifecycle API mutation under the mutation contract.

        failure_message is the alert for failures that carry no API message.
        Returns True when the API accepted the mutation.
        """
        if not self.controls_enabled:
            self.logger.debug(f"Ignoring {operation}: controller busy")
            return False

        self.loading = True
        self.state = ViewState.LOADING
        try:
            action()
        except CONSOLE_FAILURES as e:
            self.logger.warning(f"❌ {operation} failed: {e}")
            return self._fail_mutation(str(e))
        except Exception as e:
            self.logger.error(f"❌ {operation} failed: {type(e).__name__}: {e}")
            return self._fail_mutation(failure_message)

        self.logger.info(f"✅ {operation} succeeded")
        self.refresh()
        if self.partner is not None:
            self.partner.refresh()
        return True

    # ========================================================================
    # SEARCH AND PAGINATION
    # ========================================================================

    @property
    def page_result(self) -> PageResult:
        return reconcile(self.assets, self.search_text, self.page, self.page_size)

    @property
    def total_pages(self) -> int:
        return self.page_result.total_pages

    def set_search(self, text: str) -> None:
        """Change the search text; the view goes back to page 1."""
        self.search_text = text or ""
        self.page = 1

    def next_page(self) -> bool:
        if self.page >= self.total_pages:
            return False
        self.page += 1
        return True

    def previous_page(self) -> bool:
        if self.page <= 1:
            return False
        self.page -= 1
        return True

    def visible_assets(self) -> Tuple[ProcessedAsset, ...]:
        return self.page_result.rows

    def rows(self) -> List[Dict[str, str]]:
        """Display rows for the current page, keyed by column label."""
        return [
            {column.label: display_value(asset, column.field) for column in self.columns}
            for asset in self.visible_assets()
        ]


def link_views(active: AssetViewController, deleted: AssetViewController) -> None:
    """Make each controller refresh the other after a successful mutation."""
    active.partner = deleted
    deleted.partner = active
