from dataclasses import dataclass
from enum import Enum
from typing import Union

class ModalMode(str, Enum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"

class ToastLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"

@dataclass(frozen=True)
class Closed:
    mode = None

@dataclass(frozen=True)
class AddModal:
    mode = ModalMode.ADD

@dataclass(frozen=True)
class UpdateModal:
    category_id: int | str
    mode = ModalMode.UPDATE

@dataclass(frozen=True)
class DeleteModal:
    category_id: int | str
    mode = ModalMode.DELETE

Modal = Union[Closed, AddModal, UpdateModal, DeleteModal]
CLOSED = Closed()
