"""Match a controller response against its action's declared return type."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from gqlmatchers.matchers.base import Matcher
from gqlmatchers.matchers.type_matcher import TypeMatcher
from gqlmatchers.messages import summarize
from gqlmatchers.schema import model_for, to_type_view
from gqlmatchers.types import is_list_like

if TYPE_CHECKING:
    from gqlmatchers.schema import Model
    from gqlmatchers.types import TypeView

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "expected request to be successful"


class ActionDescriptor(Protocol):
    """What an action declares it returns."""

    @property
    def return_type(self) -> TypeView: ...

    @property
    def return_model(self) -> type | None: ...


class ControllerResponse(Protocol):
    """Outcome of dispatching an action."""

    @property
    def success(self) -> bool: ...

    @property
    def result(self) -> Any: ...

    @property
    def errors(self) -> Sequence[Any]: ...

    @property
    def action(self) -> ActionDescriptor: ...


@dataclass(frozen=True)
class Action:
    """Action descriptor built from a return declaration such as ``[User]!``."""

    returns: str | TypeView | type[Model]

    @property
    def return_type(self) -> TypeView:
        """Declared return type as a type view."""
        return to_type_view(self.returns)

    @property
    def return_model(self) -> type[Model] | None:
        """Model class the return type is bound to, if any."""
        return model_for(self.returns)


@dataclass(frozen=True)
class ActionResponse:
    """Plain controller response."""

    action: ActionDescriptor
    result: Any = None
    success: bool = True
    errors: tuple[Any, ...] = ()


def _error_text(error: Any) -> str | None:
    message = getattr(error, "message", None)
    if message is not None:
        return str(message)
    if isinstance(error, BaseException):
        return str(error) or None
    return None


class ResponseMatcher(Matcher):
    """Check that a response succeeded and its result fits the declared type.

    Stages run in order and stop at the first failure: status, nullability,
    list shape, model class, then a shallow and loose field check.
    """

    def __init__(self) -> None:
        """Initialize a matcher with no response; ``matches`` supplies it."""
        self.response: ControllerResponse | None = None
        self._error_message: str | None = None

    def matches(self, value: ControllerResponse) -> bool:
        self.response = value
        self._error_message = None
        return self._validate_status(value) and self._validate_type(value)

    @property
    def failure_message(self) -> str:
        return self._error_message or DEFAULT_ERROR_MESSAGE

    @property
    def description(self) -> str:
        return "be a successful request returning its declared type"

    def _fail(self, message: str) -> bool:
        self._error_message = message
        return False

    # =========================================================================
    # Stages
    # =========================================================================

    def _validate_status(self, response: ControllerResponse) -> bool:
        if response.success:
            return True

        messages = [
            text for error in response.errors if (text := _error_text(error))
        ]
        return self._fail(
            f"{DEFAULT_ERROR_MESSAGE}, but got errors:\n{summarize(messages)}",
        )

    def _validate_type(self, response: ControllerResponse) -> bool:
        return_type = response.action.return_type
        result = response.result
        return (
            self._validate_nullability(return_type, result)
            and self._validate_list_shape(return_type, result)
            and self._validate_model(response.action.return_model, result)
            and self._validate_fields(return_type, result)
        )

    def _validate_nullability(self, return_type: TypeView, result: Any) -> bool:
        if return_type.is_non_null() and result is None:
            return self._fail("Response type is not nullable, but the result is None")
        return True

    def _validate_list_shape(self, return_type: TypeView, result: Any) -> bool:
        if result is None:
            return True
        if return_type.is_list() and not is_list_like(result):
            return self._fail(
                "Response type is a list, but the result is not a list-like object",
            )
        if not return_type.is_list() and is_list_like(result):
            return self._fail(
                "Response type is not a list, but the result is a list-like object",
            )
        return True

    def _validate_model(self, return_model: type | None, result: Any) -> bool:
        instance = _unwrap_result(result)
        if instance is None or return_model is None:
            return True
        if isinstance(instance, return_model):
            return True
        return self._fail(
            f"Expected response to be an instance of {return_model.__name__}, "
            f"but it's {type(instance).__name__}",
        )

    def _validate_fields(self, return_type: TypeView, result: Any) -> bool:
        instance = _unwrap_result(result)
        if instance is None:
            logger.debug("No result instance to check against %s", return_type)
            return True

        matcher = TypeMatcher(return_type.bare(), deep=False, strict=False)
        if matcher.matches(instance):
            return True
        return self._fail(
            "Response type does not match the expected type:\n"
            f"{summarize(matcher.error_messages)}",
        )


def _unwrap_result(result: Any) -> Any:
    if is_list_like(result):
        return next(iter(result), None)
    return result
