"""Content-type contract registry."""

import copy
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterable, Iterator, Mapping

from pydantic import BaseModel, ValidationError

from .compiler import compile_model
from .consts import SECTION_BUCKETS
from .defaults import derive_default
from .errors import ContractException
from .nodes import SchemaNode
from .utils import format_validation_error

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "uncategorized"


@dataclass(frozen=True)
class ContractMetadata:
    label: str
    description: str = ""
    icon: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class ContentTypeContract:
    """Schema, default instance and presentation metadata of one section type."""

    type_id: str
    model: type[BaseModel]
    root_schema: SchemaNode
    default_data: Mapping[str, Any]
    metadata: ContractMetadata
    bucket: str | None = None

    @property
    def label(self) -> str:
        return self.metadata.label

    def new_data(self) -> dict[str, Any]:
        """Return a fresh, mutable copy of the default data."""
        return copy.deepcopy(dict(self.default_data))

    def validate(self, data: Any) -> BaseModel:
        return self.model.model_validate(data)


def define_contract(
    type_id: str,
    model: type[BaseModel],
    label: str,
    description: str = "",
    *,
    icon: str | None = None,
    category: str | None = None,
    bucket: str | None = None,
) -> ContentTypeContract:
    """Build a contract from a pydantic content model.

    The model is compiled to a schema tree and its default data derived once.
    Raises ``ContractException`` when the model is not a pydantic model or
    when the derived default data does not validate against it.
    """
    if not type_id:
        raise ContractException("Contract type id cannot be empty")
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise ContractException(f"Contract {type_id} must use a pydantic model, got {model!r}")

    root_schema = compile_model(model)
    default_data = derive_default(root_schema)

    try:
        model.model_validate(default_data)
    except ValidationError as e:
        raise ContractException(
            format_validation_error(e, f"Default data of contract {type_id} is not valid:")
        ) from e

    return ContentTypeContract(
        type_id=type_id,
        model=model,
        root_schema=root_schema,
        default_data=default_data,
        metadata=ContractMetadata(
            label=label, description=description, icon=icon, category=category
        ),
        bucket=bucket or SECTION_BUCKETS.get(type_id),
    )


class ContractRegistry:
    def __init__(self, contracts: Iterable[ContentTypeContract] = ()):
        self._contracts: dict[str, ContentTypeContract] = {}
        for contract in contracts:
            self.register(contract)

    def register(self, contract: ContentTypeContract) -> ContentTypeContract:
        if contract.type_id in self._contracts:
            raise ContractException(f"Contract {contract.type_id} is already registered")
        self._contracts[contract.type_id] = contract
        logger.debug(f"Registered contract {contract.type_id}")
        return contract

    def get_contract(self, type_id: str) -> ContentTypeContract | None:
        return self._contracts.get(type_id)

    def has_contract(self, type_id: str) -> bool:
        return type_id in self._contracts

    def list_type_ids(self) -> list[str]:
        return list(self._contracts)

    def contracts_by_category(self) -> dict[str, list[ContentTypeContract]]:
        grouped: dict[str, list[ContentTypeContract]] = {}
        for contract in self._contracts.values():
            grouped.setdefault(contract.metadata.category or DEFAULT_CATEGORY, []).append(contract)
        return grouped

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._contracts

    def __iter__(self) -> Iterator[ContentTypeContract]:
        return iter(self._contracts.values())

    def __len__(self) -> int:
        return len(self._contracts)


@lru_cache(maxsize=1)
def default_registry() -> ContractRegistry:
    """Registry populated with the built-in section catalog."""
    from .contracts import CONTRACTS

    return ContractRegistry(CONTRACTS)
