"""Config file validation for pacprune."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from pacprune.config.loader import default_config_path, suggest_key
from pacprune.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
    COMMAND_KEYS,
    LIST_OF_STRINGS_KEYS,
    NON_NEGATIVE_INT_KEYS,
    NULLABLE_LIST_OF_STRINGS_KEYS,
    POSITIVE_INT_KEYS,
)
from pacprune.exceptions.validation import ValidationError, sort_errors


def validate_config_file(config_path: Path | None = None) -> list[ValidationError]:
    """Validate a pacprune.yaml file and return all validation errors.

    Unlike :func:`pacprune.config.load_config`, this never raises; every
    problem is returned so ``pacprune validate-config`` can report them all.
    """
    errors: list[ValidationError] = []
    path = config_path.expanduser().resolve() if config_path else default_config_path()
    path_str = str(path)

    if not path.exists():
        if config_path is not None:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in NON_NEGATIVE_INT_KEYS:
        if key in raw:
            _check_int(raw[key], key=key, minimum=0, path_str=path_str, errors=errors)
    for key in POSITIVE_INT_KEYS:
        if key in raw:
            _check_int(raw[key], key=key, minimum=1, path_str=path_str, errors=errors)

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw and not _is_string_list(raw[key]):
            errors.append(_list_type_error(key, path_str))
    for key in NULLABLE_LIST_OF_STRINGS_KEYS:
        if key in raw and raw[key] is not None and not _is_string_list(raw[key]):
            errors.append(_list_type_error(key, path_str, nullable=True))
    for key in COMMAND_KEYS:
        if key in raw and _is_string_list(raw[key]) and not _names_executable(raw[key]):
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must name an executable",
                    hint="expected a non-empty list of strings",
                )
            )

    return sort_errors(errors)


def _check_int(
    value: Any,
    *,
    key: str,
    minimum: int,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    qualifier = "non-negative" if minimum == 0 else "positive"
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=key,
                message=f"invalid type for `{key}`",
                hint=f"expected a {qualifier} integer",
            )
        )
    elif value < minimum:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=key,
                message=f"`{key}` must be a {qualifier} integer, got {value}",
            )
        )


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _names_executable(value: list[str]) -> bool:
    return bool(value) and bool(value[0].strip())


def _list_type_error(key: str, path_str: str, *, nullable: bool = False) -> ValidationError:
    hint = "expected a list of strings or null" if nullable else "expected a list of strings"
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=key,
        message=f"invalid type for `{key}`",
        hint=hint,
    )
