"""Local parameter checks run by endpoint methods before any I/O.

Every failure raises :class:`~exolix_sdk.base.errors.ValidationError`
synchronously, before a signal or timer is allocated.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from .base.dto import ApiModel
from .base.errors import ValidationError

M = TypeVar("M", bound=ApiModel)


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "params"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def coerce_params(model: Type[M], params: Union[M, Mapping[str, Any], None]) -> M:
    """Return ``params`` as an instance of ``model``.

    Accepts the model itself, a mapping with API (camelCase) or snake_case
    keys, or ``None`` for an empty parameter set.
    """
    if params is None:
        return model()
    if isinstance(params, model):
        return params
    if isinstance(params, Mapping):
        try:
            return model.model_validate(dict(params))
        except PydanticValidationError as exc:
            raise ValidationError(f"invalid {model.__name__}: {_describe(exc)}") from exc
    raise ValidationError(f"{model.__name__} or mapping expected, got {type(params).__name__}")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def require_non_empty(value: Any, name: str) -> None:
    if _is_blank(value):
        raise ValidationError(f"{name} is required", field=name)


def require_fields(params: ApiModel, *fields: str, message: Optional[str] = None) -> None:
    """Raise when any of ``fields`` (snake_case attribute names) is blank.

    The error names the first missing field by its API spelling unless a
    ``message`` covering all of them is given.
    """
    for attr in fields:
        if _is_blank(getattr(params, attr)):
            api_name = type(params).model_fields[attr].alias or attr
            raise ValidationError(message or f"{api_name} is required", field=api_name)


def require_one_amount(params: M) -> M:
    """Exactly one of ``amount`` / ``withdrawal_amount`` must be set.

    Blank strings count as unset. Returns ``params`` with a blank amount
    cleared so it is not sent.
    """
    has_amount = not _is_blank(getattr(params, "amount"))
    has_withdrawal_amount = not _is_blank(getattr(params, "withdrawal_amount"))
    if not has_amount and not has_withdrawal_amount:
        raise ValidationError("Either amount or withdrawalAmount must be provided", field="amount")
    if has_amount and has_withdrawal_amount:
        raise ValidationError("Provide either amount or withdrawalAmount, not both", field="withdrawalAmount")
    blank = {
        attr: None
        for attr in ("amount", "withdrawal_amount")
        if isinstance(getattr(params, attr), str) and _is_blank(getattr(params, attr))
    }
    return params.model_copy(update=blank) if blank else params


__all__ = [
    "coerce_params",
    "require_non_empty",
    "require_fields",
    "require_one_amount",
]
