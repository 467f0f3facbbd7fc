from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ...introspect import describe

router = APIRouter(prefix="/contracts", tags=["contracts"])


class ContractSummary(BaseModel):
    type_id: str
    label: str
    description: str
    icon: str | None
    category: str | None
    bucket: str | None


class ContractListResponse(BaseModel):
    success: bool = True
    contracts: list[ContractSummary]
    categories: dict[str, list[str]]


class ContractDetailResponse(ContractSummary):
    success: bool = True
    default_data: Any
    schema_tree: dict[str, Any]


def summarize(contract) -> ContractSummary:
    return ContractSummary(
        type_id=contract.type_id,
        label=contract.metadata.label,
        description=contract.metadata.description,
        icon=contract.metadata.icon,
        category=contract.metadata.category,
        bucket=contract.bucket,
    )


@router.get("", response_model=ContractListResponse)
def list_contracts(request: Request):
    registry = request.app.state.registry
    return ContractListResponse(
        contracts=[summarize(registry.get_contract(t)) for t in registry.list_type_ids()],
        categories={
            category: [contract.type_id for contract in contracts]
            for category, contracts in registry.contracts_by_category().items()
        },
    )


@router.get("/{type_id}", response_model=ContractDetailResponse)
def get_contract(type_id: str, request: Request):
    contract = request.app.state.registry.get_contract(type_id)
    if contract is None:
        raise HTTPException(status_code=404, detail=f"Unknown section type: {type_id}")

    return ContractDetailResponse(
        **summarize(contract).model_dump(),
        default_data=contract.new_data(),
        schema_tree=describe(contract.root_schema),
    )
