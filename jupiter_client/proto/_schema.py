"""
Schema builder - declares Jupiter protobuf messages from descriptors.

The message types are assembled at import time into a private descriptor pool,
so no protoc step is needed to use them.
"""
from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Dict, List, Optional, Sequence, Tuple

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.internal import enum_type_wrapper

FieldProto = descriptor_pb2.FieldDescriptorProto

_SCALAR_TYPES = {
    "string": FieldProto.TYPE_STRING,
    "bool": FieldProto.TYPE_BOOL,
    "int32": FieldProto.TYPE_INT32,
    "int64": FieldProto.TYPE_INT64,
    "uint64": FieldProto.TYPE_UINT64,
    "double": FieldProto.TYPE_DOUBLE,
}

# One pool shared by all Jupiter schema files, kept apart from the default pool
_pool = descriptor_pool.DescriptorPool()


@dataclass
class Field:
    """A message field. `kind` is a scalar name, a message/enum name or `map<K,V>`."""
    name: str
    number: int
    kind: str
    repeated: bool = False
    json_name: Optional[str] = None
    oneof: Optional[str] = None


@dataclass
class Message:
    name: str
    fields: List[Field] = dataclass_field(default_factory=list)


@dataclass
class Enum:
    name: str
    values: Sequence[str] = ()


def _json_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _entry_name(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_")) + "Entry"


def _parse_map(kind: str) -> Optional[Tuple[str, str]]:
    if not (kind.startswith("map<") and kind.endswith(">")):
        return None
    key, value = kind[4:-1].split(",")
    return key.strip(), value.strip()


def _fill_field(
    proto: descriptor_pb2.FieldDescriptorProto,
    package: str,
    enum_names: set,
    name: str,
    number: int,
    kind: str,
    repeated: bool,
) -> None:
    proto.name = name
    proto.number = number
    proto.label = FieldProto.LABEL_REPEATED if repeated else FieldProto.LABEL_OPTIONAL
    if kind in _SCALAR_TYPES:
        proto.type = _SCALAR_TYPES[kind]
    else:
        proto.type = FieldProto.TYPE_ENUM if kind in enum_names else FieldProto.TYPE_MESSAGE
        proto.type_name = f".{package}.{kind}"


def _build_message(
    package: str,
    message: Message,
    enum_names: set,
) -> descriptor_pb2.DescriptorProto:
    proto = descriptor_pb2.DescriptorProto(name=message.name)
    oneofs: Dict[str, int] = {}

    for declared in message.fields:
        field_proto = proto.field.add()
        map_types = _parse_map(declared.kind)

        if map_types is None:
            _fill_field(field_proto, package, enum_names, declared.name, declared.number, declared.kind, declared.repeated)
        else:
            # Maps are repeated fields of a synthetic nested entry message
            entry = proto.nested_type.add(name=_entry_name(declared.name))
            entry.options.map_entry = True
            key_kind, value_kind = map_types
            _fill_field(entry.field.add(), package, enum_names, "key", 1, key_kind, False)
            _fill_field(entry.field.add(), package, enum_names, "value", 2, value_kind, False)
            entry.field[0].json_name = "key"
            entry.field[1].json_name = "value"

            field_proto.name = declared.name
            field_proto.number = declared.number
            field_proto.label = FieldProto.LABEL_REPEATED
            field_proto.type = FieldProto.TYPE_MESSAGE
            field_proto.type_name = f".{package}.{message.name}.{entry.name}"

        field_proto.json_name = declared.json_name or _json_name(declared.name)

        if declared.oneof is not None:
            if declared.oneof not in oneofs:
                oneofs[declared.oneof] = len(proto.oneof_decl)
                proto.oneof_decl.add(name=declared.oneof)
            field_proto.oneof_index = oneofs[declared.oneof]

    return proto


class SchemaFile:
    """
    A registered .proto-equivalent file.

    Usage:
        schema = build_file("jupiter/price.proto", "jupiter.price", messages, enums)
        PriceResponse = schema.message("PriceResponse")
    """

    def __init__(self, package: str):
        self.package = package

    def message(self, name: str):
        """Return the generated message class for `name`."""
        descriptor = _pool.FindMessageTypeByName(f"{self.package}.{name}")
        return message_factory.GetMessageClass(descriptor)

    def enum(self, name: str) -> enum_type_wrapper.EnumTypeWrapper:
        """Return an enum wrapper exposing Name()/Value() and the value constants."""
        descriptor = _pool.FindEnumTypeByName(f"{self.package}.{name}")
        return enum_type_wrapper.EnumTypeWrapper(descriptor)


def build_file(
    filename: str,
    package: str,
    messages: Sequence[Message],
    enums: Sequence[Enum] = (),
) -> SchemaFile:
    """
    Register a proto3 file with the Jupiter descriptor pool.

    Args:
        filename: Virtual .proto filename (unique within the pool)
        package: Proto package, e.g. "jupiter.price"
        messages: Top-level messages, in any order
        enums: Top-level enums; value numbers follow declaration order from 0

    Returns:
        A SchemaFile for looking up message classes and enums
    """
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=filename,
        package=package,
        syntax="proto3",
    )
    enum_names = {enum.name for enum in enums}

    for enum in enums:
        enum_proto = file_proto.enum_type.add(name=enum.name)
        for number, value_name in enumerate(enum.values):
            enum_proto.value.add(name=value_name, number=number)

    for message in messages:
        file_proto.message_type.append(_build_message(package, message, enum_names))

    _pool.AddSerializedFile(file_proto.SerializeToString())
    return SchemaFile(package)
