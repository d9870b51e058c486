from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any

from ..api_client import ApiClient
from ..auth import AuthContext
from ..constants import PAGE_SIZE, SEARCH_DEBOUNCE_SECONDS
from ..debounce import Debouncer
from ..domain import CLOSED, AddModal, DeleteModal, Modal, ModalMode, UpdateModal
from ..exceptions import RequestError
from ..models import Category
from ..notifications import Notifier
from ..validators import ValidationError, validate_category_name

logger = logging.getLogger(__name__)

FETCH_FAILURE_MESSAGE = "Failed to load categories. Please try again."


@dataclass(frozen=True)
class PageLink:
    number: int
    active: bool


@dataclass(frozen=True)
class Pagination:
    previous_page: int
    next_page: int
    previous_disabled: bool
    next_disabled: bool
    pages: list[PageLink]


class CategoryListScreen:
    """State and actions of the paginated category table and its add/update/delete modal."""

    def __init__(
        self,
        api: ApiClient,
        auth: AuthContext | None,
        notifier: Notifier,
        page_size: int = PAGE_SIZE,
        debounce_delay: float = SEARCH_DEBOUNCE_SECONDS,
    ):
        self.api = api
        self.auth = auth
        self.notifier = notifier
        self.page_size = page_size

        self.search_term = ""
        self.current_page = 1
        self.total_pages = 1
        self.categories: list[Category] = []
        self.is_loading = False

        self.modal: Modal = CLOSED
        self.form_name = ""
        self.field_errors: dict[str, str] = {}
        self.last_error: RequestError | None = None

        self._fetch_seq = 0
        self._search = Debouncer(debounce_delay, self._fetch_for_search)

    # ----------------------------
    # Fetching
    # ----------------------------
    async def fetch_categories(self, page: int = 1, name_filter: str = "") -> bool:
        """Load one page of categories, optionally filtered by a name substring.

        Only the most recently started fetch may change the screen; an older
        response that resolves later is dropped.
        """
        page = max(page, 1)
        self._fetch_seq += 1
        seq = self._fetch_seq
        self.is_loading = True
        try:
            result = await self.api.list_categories(page, self.page_size, name_filter or None)
        except RequestError as e:
            if seq == self._fetch_seq:
                self.last_error = e
                self.notifier.error(FETCH_FAILURE_MESSAGE)
            else:
                logger.debug(f"Dropping failure of stale fetch #{seq}")
            return False
        finally:
            if seq == self._fetch_seq:
                self.is_loading = False

        if seq != self._fetch_seq:
            logger.debug(f"Dropping stale fetch #{seq} (latest is #{self._fetch_seq})")
            return False

        self.categories = result.data
        self.total_pages = result.total_number_of_pages
        self.current_page = page
        if page > self.total_pages:
            # the filter shrank the result set; show its last page instead
            self.current_page = self.total_pages
            return await self.fetch_categories(self.total_pages, name_filter)
        return True

    def set_search_term(self, term: str) -> None:
        self.search_term = term
        self._search.trigger(term)

    async def _fetch_for_search(self, term: str) -> None:
        await self.fetch_categories(self.current_page, term)

    async def wait_for_search(self) -> None:
        await self._search.wait()

    async def handle_page_change(self, page: int) -> bool:
        if page < 1 or page > self.total_pages:
            return False
        # the immediate fetch already uses the latest search term
        self._search.cancel()
        self.current_page = page
        await self.fetch_categories(page, self.search_term)
        return True

    # ----------------------------
    # Modal
    # ----------------------------
    def open_modal(self, mode: ModalMode | str, category_id: int | str | None = None) -> Modal:
        mode = ModalMode(mode)
        self.field_errors = {}
        self.form_name = ""

        if mode == ModalMode.ADD:
            self.modal = AddModal()
        elif category_id is None:
            raise ValueError(f"{mode.value} modal requires a category id")
        elif mode == ModalMode.UPDATE:
            self.modal = UpdateModal(category_id)
            selected = self.find_category(category_id)
            self.form_name = selected.name if selected else ""
        else:
            self.modal = DeleteModal(category_id)
        return self.modal

    def close_modal(self) -> None:
        self.modal = CLOSED
        self.form_name = ""
        self.field_errors = {}

    def find_category(self, category_id: int | str) -> Category | None:
        for category in self.categories:
            if str(category.id) == str(category_id):
                return category
        return None

    async def submit_modal(self, name: str) -> bool:
        if isinstance(self.modal, AddModal):
            return await self.create_category(name)
        if isinstance(self.modal, UpdateModal):
            return await self.update_category(self.modal.category_id, name)
        return False

    async def confirm_delete(self) -> bool:
        if not isinstance(self.modal, DeleteModal):
            return False
        return await self.delete_category(self.modal.category_id)

    # ----------------------------
    # Mutations
    # ----------------------------
    async def create_category(self, name: str) -> bool:
        name = self._validated_name(name)
        if name is None:
            return False
        return await self._mutate(
            self.api.create_category(name),
            "Category added successfully",
            "Failed to add category",
        )

    async def update_category(self, category_id: int | str, name: str) -> bool:
        name = self._validated_name(name)
        if name is None:
            return False
        return await self._mutate(
            self.api.update_category(category_id, name),
            "Category updated successfully",
            "Failed to update category",
        )

    async def delete_category(self, category_id: int | str) -> bool:
        return await self._mutate(
            self.api.delete_category(category_id),
            "Category deleted successfully",
            "Failed to delete category",
        )

    def _validated_name(self, name: str) -> str | None:
        self.form_name = name or ""
        try:
            validated = validate_category_name(name)
        except ValidationError as e:
            self.field_errors = e.field_errors
            return None
        self.field_errors = {}
        return validated

    async def _mutate(self, call: Awaitable[Any], success_message: str, failure_message: str) -> bool:
        try:
            await call
        except RequestError as e:
            self.last_error = e
            self.notifier.error(e.user_message(failure_message))
            return False

        logger.info(success_message)
        self.notifier.success(success_message)
        await self.fetch_categories(self.current_page, self.search_term)
        self.close_modal()
        return True

    # ----------------------------
    # View helpers
    # ----------------------------
    def row_number(self, row_index: int) -> int:
        return (self.current_page - 1) * self.page_size + row_index + 1

    def rows(self) -> list[tuple[int, Category]]:
        return [(self.row_number(i), c) for i, c in enumerate(self.categories)]

    @property
    def show_empty_state(self) -> bool:
        return not self.is_loading and not self.categories

    @property
    def modal_title(self) -> str:
        return "Add New Category" if isinstance(self.modal, AddModal) else "Update Category"

    @property
    def submit_label(self) -> str:
        return "Save Category" if isinstance(self.modal, AddModal) else "Update Category"

    def pagination(self) -> Pagination | None:
        if self.total_pages <= 1:
            return None
        return Pagination(
            previous_page=self.current_page - 1,
            next_page=self.current_page + 1,
            previous_disabled=self.current_page == 1,
            next_disabled=self.current_page == self.total_pages,
            pages=[
                PageLink(number=n, active=n == self.current_page)
                for n in range(1, self.total_pages + 1)
            ],
        )

    async def aclose(self) -> None:
        self._search.cancel()
