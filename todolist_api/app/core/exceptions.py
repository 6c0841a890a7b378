"""
Domain exceptions raised by the service layer.

They describe caller errors (missing input, unknown ids, treating the
owner as a collaborator) and are never retried.  ``main.create_app``
maps each class to an HTTP status through ``status_code``.
"""


class ToDoListError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NullReferenceEntityException(ToDoListError):
    """A required entity was passed as ``None``."""

    status_code = 400


class EntityNotFoundException(ToDoListError):
    """An id did not resolve to a stored entity."""

    status_code = 404

    @classmethod
    def for_entity(cls, entity: str, entity_id: int) -> "EntityNotFoundException":
        return cls(f"{entity} (id={entity_id}) was not found")


class UserIsOwnerOfThisToDoException(ToDoListError):
    """The owner of a ToDo was used where a collaborator is expected."""

    status_code = 409
