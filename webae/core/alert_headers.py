"""Alert Headers — response headers announcing entity changes and failures to the client.

Invariants:
    - Success alerts carry X-<app>-alert (message key) and X-<app>-params (entity id)
    - Failure alerts carry X-<app>-error ("error.<key>") and X-<app>-params (entity name)
    - Message keys are i18n keys: "<app>.<entity>.<action>"

Design Decisions:
    - Pure functions returning plain dicts: routes merge them into Response.headers,
      error handlers pass them to JSONResponse
"""

from webae.core.domain_types import EntityAction


def create_alert(application_name: str, message: str, param: str) -> dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": param,
    }


def create_entity_alert(
    application_name: str, entity_name: str, action: EntityAction, entity_id: str,
) -> dict[str, str]:
    """Alert for a created/updated/deleted entity, keyed by its id."""
    return create_alert(
        application_name,
        f"{application_name}.{entity_name}.{action.value}",
        entity_id,
    )


def create_failure_alert(
    application_name: str, entity_name: str, error_key: str,
) -> dict[str, str]:
    return {
        f"X-{application_name}-error": f"error.{error_key}",
        f"X-{application_name}-params": entity_name,
    }
