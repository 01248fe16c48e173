"""
Shared field builders for contract schemas.

Terse constructors for the FieldSpecs every schema module repeats:

    text("title", required=True, rules=(NotEmpty(), MaxLength(500)))
    enum_field("status", ActionStatus)
    list_of("tags", text("tag"), rules=(ListSize(max=20),))
"""

from enum import Enum
from typing import Tuple, Type

from ..registry import ContractSchema, FieldKind, FieldSpec
from ..rules import Rule


def text(name: str, *, required: bool = False, rules: Tuple[Rule, ...] = (), description: str = "") -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.TEXT, required=required, rules=rules, description=description)


def identifier(name: str, *, required: bool = False, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.IDENTIFIER, required=required, description=description)


def integer(
    name: str,
    *,
    required: bool = False,
    rules: Tuple[Rule, ...] = (),
    coerce: bool = False,
    description: str = "",
) -> FieldSpec:
    return FieldSpec(
        name=name,
        kind=FieldKind.INTEGER,
        required=required,
        rules=rules,
        coerce=coerce,
        description=description,
    )


def decimal(
    name: str,
    *,
    required: bool = False,
    rules: Tuple[Rule, ...] = (),
    coerce: bool = False,
    description: str = "",
) -> FieldSpec:
    return FieldSpec(
        name=name,
        kind=FieldKind.DECIMAL,
        required=required,
        rules=rules,
        coerce=coerce,
        description=description,
    )


def boolean(name: str, *, required: bool = False, coerce: bool = False, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.BOOLEAN, required=required, coerce=coerce, description=description)


def datetime_field(name: str, *, required: bool = False, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.DATETIME, required=required, description=description)


def enum_field(name: str, enum: Type[Enum], *, required: bool = False, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.ENUM, enum=enum, required=required, description=description)


def obj(name: str, *, required: bool = False, rules: Tuple[Rule, ...] = (), description: str = "") -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.OBJECT, required=required, rules=rules, description=description)


def list_of(
    name: str,
    item: FieldSpec,
    *,
    required: bool = False,
    rules: Tuple[Rule, ...] = (),
    description: str = "",
) -> FieldSpec:
    return FieldSpec(
        name=name,
        kind=FieldKind.LIST,
        item=item,
        required=required,
        rules=rules,
        description=description,
    )


def nested(name: str, schema: ContractSchema, *, required: bool = False) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.NESTED, schema=schema, required=required)
