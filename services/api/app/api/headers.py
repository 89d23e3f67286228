"""Alert headers read by the generated web client to display toasts.

Messages are translation keys (``<app>.<entity>.created``), the params header
carries the entity id, URL-encoded.
"""

from __future__ import annotations

from urllib.parse import quote


def create_alert(app_name: str, message: str, param: str) -> dict[str, str]:
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": quote(param, safe=""),
    }


def create_entity_creation_alert(
    app_name: str, entity_name: str, entity_id: str
) -> dict[str, str]:
    return create_alert(app_name, f"{app_name}.{entity_name}.created", entity_id)


def create_entity_update_alert(
    app_name: str, entity_name: str, entity_id: str
) -> dict[str, str]:
    return create_alert(app_name, f"{app_name}.{entity_name}.updated", entity_id)


def create_entity_deletion_alert(
    app_name: str, entity_name: str, entity_id: str
) -> dict[str, str]:
    return create_alert(app_name, f"{app_name}.{entity_name}.deleted", entity_id)


def create_failure_alert(
    app_name: str, entity_name: str, error_key: str
) -> dict[str, str]:
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }
