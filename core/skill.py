"""
core/skill.py

Directive router for the smart home skill.

Inbound directives are routed by (namespace, name) to the handler registered for
them. Only discovery is handled by this bridge; any other directive is reported
through the error callback as an invalid directive.
"""

from typing import Any, Dict, Tuple

from config.logging_config import get_logger
from monitoring import DIRECTIVE_COUNT
from provider_api import ProviderClient

from .context import CapturingContext, CompletionContext
from .discovery import DiscoveryHandler, InvalidDirectiveError, directive_header

logger = get_logger(__name__)

__all__ = ["SkillRouter", "InvalidDirectiveError"]


class SkillRouter:
    """
    Routes directives to handlers.

    Responsibilities:
    - Handler lookup by the directive header's namespace and name
    - Counting directives per outcome
    - Rejecting directives with no handler
    """

    def __init__(self, client: ProviderClient):
        """
        Register the handlers backed by the given device source.

        Args:
            client (ProviderClient): Device source shared by all handlers
        """
        discovery = DiscoveryHandler(client)
        self.handlers: Dict[Tuple[str, str], Any] = {
            (discovery.namespace, discovery.name): discovery,
        }
        logger.info("Initialized with %d handlers", len(self.handlers))

    def dispatch(self, event: Dict[str, Any], context: CompletionContext) -> None:
        """
        Route one directive and let its handler complete `context`.

        Args:
            event (Dict[str, Any]): The inbound directive envelope
            context (CompletionContext): Completion callbacks for this invocation
        """
        try:
            header = directive_header(event)
        except InvalidDirectiveError as e:
            logger.error("Rejected directive: %s", e)
            DIRECTIVE_COUNT.labels(namespace="unknown", name="unknown", outcome="error").inc()
            context.fail(e)
            return

        namespace = str(header.get("namespace", ""))
        name = str(header.get("name", ""))
        handler = self.handlers.get((namespace, name))

        if handler is None:
            logger.warning("No handler for directive %s.%s", namespace, name)
            DIRECTIVE_COUNT.labels(namespace=namespace, name=name, outcome="error").inc()
            context.fail(InvalidDirectiveError(f"Unsupported directive: {namespace}.{name}"))
            return

        # Wrap the callbacks so the outcome is counted exactly when it fires
        def on_success(result: Dict[str, Any]) -> None:
            DIRECTIVE_COUNT.labels(namespace=namespace, name=name, outcome="success").inc()
            context.succeed(result)

        def on_error(error: BaseException) -> None:
            DIRECTIVE_COUNT.labels(namespace=namespace, name=name, outcome="error").inc()
            context.fail(error)

        handler.handle(event, CompletionContext(on_success=on_success, on_error=on_error))

    def invoke(self, event: Dict[str, Any]) -> CapturingContext:
        """
        Dispatch synchronously and return the context holding the outcome.

        Exactly one of `result` or `error` is set on the returned context.
        """
        context = CapturingContext()
        self.dispatch(event, context)
        return context

    def get_handler_info(self) -> Dict[str, Any]:
        """
        Get information about registered handlers.

        Returns:
            Dict[str, Any]: "Namespace.Name" -> handler class name
        """
        return {
            f"{namespace}.{name}": handler.__class__.__name__
            for (namespace, name), handler in self.handlers.items()
        }
