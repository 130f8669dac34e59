"""
Console demonstrations of each pattern.

Every demo writes human-readable lines through ``out`` (``print`` by default)
so the CLI and tests can capture them.
"""

import json
from typing import Callable, Dict, List, Optional

from patterncraft.config.manager import ConfigurationManager
from patterncraft.config.schemas import ServiceConfig
from patterncraft.domain.core.exceptions import UnsupportedVariantError
from patterncraft.domain.document import SpreadsheetDocument, TextDocument, describe_document
from patterncraft.domain.http import HttpRequest
from patterncraft.domain.payment import PaymentFactory
from patterncraft.infrastructure.patterns import get_singleton
from patterncraft.infrastructure.pool import DatabaseConnectionPool

Output = Callable[[str], None]

SAMPLE_BODY = json.dumps({"name": "John Doe", "email": "john@example.com"}, indent=4)


def run_builder_demo(out: Output = print) -> HttpRequest:
    request = (
        HttpRequest.builder()
        .url("https://api.example.com/users")
        .method("POST")
        .header("Content-Type", "application/json")
        .header("Authorization", "Bearer token123")
        .body(SAMPLE_BODY)
        .timeout(60)
        .build()
    )
    out("Request: " + json.dumps(request.to_dict(), indent=2))

    retry = request.with_timeout(120)
    out(f"Derived timeout: {retry.timeout} (original {request.timeout})")
    return request


def run_prototype_demo(out: Output = print) -> Dict[str, object]:
    initial_tags: List[str] = ["draft", "2026"]
    original = TextDocument("Report", "Initial content", "Alice", initial_tags)
    out(f"Original Text: {original}")

    cloned = original.clone()
    out(f"Cloned Text:   {cloned}")

    initial_tags.append("modified-external-list")
    out(f"External initialTags modified: {initial_tags}")
    out(f"Original Text tags after external modification: {list(original.tags)}")
    out(f"Cloned Text tags after external modification:   {list(cloned.tags)}")

    updated = original.with_content("Updated content")
    out(f"Updated Text (with_content): {updated}")
    out(f"original is cloned: {original is cloned}")
    out(f"original == cloned: {original == cloned}")

    table = [["A1", "B1", "C1"], ["A2", "B2", "C2"]]
    sheet = SpreadsheetDocument("Sheet1", table, 2, 3)
    out(f"Original Sheet content: {sheet.get_content()}")

    sheet_clone = sheet.clone()
    out(f"Cloned Sheet content:   {sheet_clone.get_content()}")

    table[0][0] = "A1-modified"
    out(f"External table after modification: {table}")
    out(f"Original Sheet content after external change: {sheet.get_content()}")
    out(f"Cloned Sheet content after external change:   {sheet_clone.get_content()}")

    for document in (original, sheet):
        out(describe_document(document))

    return {"text": original, "sheet": sheet}


def run_factory_demo(out: Output = print) -> List[str]:
    results = []
    for payment_type, amount, details in (
        ("credit_card", 100.00, ("4111111111111111", "123")),
        ("upi", 250.50, ("user@bank",)),
        ("netbanking", 500.25, ("12345678", "IFSC0001")),
    ):
        payment = PaymentFactory.create_payment(payment_type, *details)
        result = PaymentFactory.process_payment(payment, amount)
        out(result)
        results.append(result)

    try:
        PaymentFactory.create_payment("cash")
    except UnsupportedVariantError as e:
        out(f"Expected error for unknown type: {e}")

    return results


def run_singleton_demo(
    out: Output = print, manager: Optional[ConfigurationManager] = None
) -> ServiceConfig:
    manager = manager or get_singleton(ConfigurationManager)

    pool = get_singleton(DatabaseConnectionPool, manager.get_pool_config())
    out(f"Max connections: {pool.max_connections}")
    out(f"Acquired: {pool.acquire_connection()}")

    config = manager.get_config()
    out(f"API Key (before): {config.service.api_key}")

    new_service = config.service.model_copy(update={"api_key": "api-key-456"})
    manager.update_config(config.model_copy(update={"service": new_service}))

    updated = manager.get_service_config()
    out(f"API Key (after): {updated.api_key}")
    return updated


DEMOS: Dict[str, Callable[..., object]] = {
    "builder": run_builder_demo,
    "prototype": run_prototype_demo,
    "factory": run_factory_demo,
    "singleton": run_singleton_demo,
}
