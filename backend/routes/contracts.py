"""
Contract Introspection API Routes

Lets clients (and the frontend's form builder) discover what each inbound
operation accepts, and dry-run a payload without side effects.

Endpoints:
- GET  /api/contracts                  - List registered contracts
- GET  /api/contracts/<name>           - Describe one contract
- POST /api/contracts/<name>/validate  - Validate a JSON body against it

This is a THIN route handler - all validation logic is in api/contracts/.
"""

from flask import Blueprint, g, jsonify, request

from api.contracts import get_contract, list_contracts, validate_payload
from api.contracts.wrapper import CONTRACT_VERSION_HEADER
from api.middleware.error_envelope import make_error_response
from api.serializers import success_envelope

contracts_bp = Blueprint('contracts', __name__)


@contracts_bp.route("", methods=["GET"])
def list_registered_contracts():
    """
    List registered contracts.

    Query params:
        entity: Optional entity filter (e.g. "meeting")
    """
    entity = request.args.get("entity") or None
    contracts = [get_contract(name) for name in list_contracts(entity)]
    data = [
        {
            "name": c.name,
            "entity": c.entity,
            "operation": c.operation,
            "version": c.version,
            "mode": c.mode.value,
        }
        for c in contracts
    ]
    return jsonify(success_envelope(data, meta={"count": len(data), "entity": entity}))


@contracts_bp.route("/<name>", methods=["GET"])
def describe_contract(name):
    """Describe the fields and cross-field checks of one contract."""
    contract = get_contract(name)
    if contract is None:
        return _unknown_contract(name)

    response = jsonify(success_envelope(contract.describe()))
    response.headers[CONTRACT_VERSION_HEADER] = contract.version
    return response


@contracts_bp.route("/<name>/validate", methods=["POST"])
def validate_against_contract(name):
    """
    Dry-run validation of the JSON body.

    Returns 200 with the normalized value, or 400 with every violation.
    """
    contract = get_contract(name)
    if contract is None:
        return _unknown_contract(name)
    g.contract_name = contract.name

    body = request.get_json(silent=True)
    if body is None:
        raw = request.get_data(as_text=True)
        body = raw if raw.strip() else {}

    result = validate_payload(body, contract)
    if not result.ok:
        response, status_code = make_error_response(
            code="VALIDATION_FAILED",
            message=f"{len(result.violations)} validation error(s)",
            details={"violations": [v.to_dict() for v in result.violations]},
        )
    else:
        response = jsonify(success_envelope(
            result.value,
            meta={"contract": contract.name, "version": contract.version},
        ))
        status_code = 200

    response.headers[CONTRACT_VERSION_HEADER] = contract.version
    return response, status_code


def _unknown_contract(name: str):
    return make_error_response(
        code="UNKNOWN_CONTRACT",
        message=f"No contract registered as '{name}'",
        hint="GET /api/contracts lists registered contracts",
    )
