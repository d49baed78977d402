"""Structured logging shared by the personnel services.

Every service binds its class name once and then scopes a logger per
operation, so a single engine call can be followed through the logs by
its correlation id:

    class JudgeMoveService(LoggingMixin):
        def __init__(self, store: PersonnelStoreProtocol) -> None:
            self._store = store
            self._init_logger()

        async def move(self, judge_name: str, ...) -> MoveResult:
            log = self._log_operation("move", judge_name=judge_name)
            try:
                ...
            except CourtPersonnelError as e:
                self._log_rejection(log, "move_rejected", e)
                raise
            log.info("judge_moved")
"""

import structlog

from src.domain.exceptions import CourtPersonnelError
from src.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Per-service structlog logger.

    Attributes:
        _log: Logger bound with service and component names.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "court_personnel") -> None:
        """Bind the service logger. Call at the end of __init__."""
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Logger for one engine or registry call.

        Args:
            operation: Operation name, e.g. "process_departure".
            **context: Identifiers of the judges and slots involved.

        Returns:
            Logger bound with the operation, the current correlation id
            and the given context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )

    @staticmethod
    def _log_rejection(
        log: structlog.BoundLogger, event: str, error: CourtPersonnelError
    ) -> None:
        """Record a domain rejection before it propagates to the caller."""
        log.warning(event, error=type(error).__name__, message=str(error))
