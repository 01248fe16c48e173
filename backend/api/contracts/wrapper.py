"""
@api_contract decorator - applies request contracts to route handlers.

Usage:
    @meetings_bp.route("/companies/<company_id>/meetings", methods=["POST"])
    @api_contract("meeting.create")
    def create_meeting(company_id):
        # Handler reads the validated value from g.normalized_params
        ...

The decorator:
1. Collects the raw payload (query string for GET/DELETE, JSON body otherwise)
2. Validates it against the named contract
3. On success, stores the normalized value on g.normalized_params
4. On failure, returns 400 with every violation in the error envelope

validate_event() is the same entry point for realtime (socket) events,
which have no Flask request: it raises ValidationFailed and the socket
server turns that into its own error event.
"""

import functools
import logging
from typing import Any, Callable, Dict

from flask import g, request

from api.middleware.error_envelope import make_error_response

from . import schemas  # noqa: F401  (registers the contract catalog)
from .registry import Contract, get_contract
from .validate import ValidationFailed, enforce, validate_payload


logger = logging.getLogger('api.contracts')

CONTRACT_VERSION_HEADER = 'X-API-Contract-Version'


def api_contract(contract_name: str):
    """
    Decorator that enforces a request contract on a route handler.

    Args:
        contract_name: The contract name (e.g., "meeting.create")

    Raises:
        KeyError: At decoration time, if the contract is not registered
    """
    _resolve(contract_name)

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            # Look up per call so set_contract_mode/re-registration apply
            contract = _resolve(contract_name)
            g.contract_name = contract.name

            result = validate_payload(_collect_raw_params(), contract)
            if not result.ok:
                response, status_code = make_error_response(
                    code="VALIDATION_FAILED",
                    message=f"{len(result.violations)} validation error(s)",
                    details={"violations": [v.to_dict() for v in result.violations]},
                )
                response.headers[CONTRACT_VERSION_HEADER] = contract.version
                return response, status_code

            g.normalized_params = result.value
            g.contract = contract
            return fn(*args, **kwargs)

        return wrapper
    return decorator


def validate_event(contract_name: str, payload: Any) -> Dict[str, Any]:
    """
    Validate a realtime event payload.

    Returns:
        The normalized payload

    Raises:
        KeyError: If the contract is not registered
        ValidationFailed: If the payload violates the contract
    """
    try:
        return enforce(payload, _resolve(contract_name))
    except ValidationFailed as e:
        logger.debug(f"Rejected event payload for {contract_name}: {e.message}")
        raise


def _resolve(contract_name: str) -> Contract:
    contract = get_contract(contract_name)
    if contract is None:
        raise KeyError(f"No contract registered as '{contract_name}'")
    return contract


def _collect_raw_params() -> Any:
    """Collect the raw payload for the current request."""
    if request.method in ('GET', 'DELETE', 'HEAD'):
        return request.args.to_dict()

    body = request.get_json(silent=True)
    if body is not None:
        return body
    data = request.get_data(as_text=True)
    # No body at all is an empty object; anything else unparsable is reported
    return data if data.strip() else {}
