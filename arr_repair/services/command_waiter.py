"""Service that runs a remote command and waits for it to finish."""

import logging
import time
from collections.abc import Callable

from arr_repair.config import WaitPolicy
from arr_repair.exceptions import ApiError, AuthorizationError, CommandTimeoutError
from arr_repair.interfaces import ArrApiProtocol
from arr_repair.models import CommandBody, CommandStatus

logger = logging.getLogger(__name__)


class RemoteCommandWaiter:
    """Submit a command and poll its status until it completes.

    Each attempt submits the command once and polls every
    ``policy.poll_interval`` seconds for at most ``policy.max_wait``
    seconds. A timed out attempt is retried up to ``policy.retries``
    times. Authorization failures are never retried.
    """

    def __init__(
        self,
        api: ArrApiProtocol,
        policy: WaitPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the waiter.

        Args:
            api: Server the commands are sent to
            policy: Polling policy (defaults to 5s interval, 30s wait, 3 retries)
            sleep: Blocking sleep function
            clock: Monotonic clock used for elapsed time and deadlines
        """
        self.api = api
        self.policy = policy or WaitPolicy()
        self._sleep = sleep
        self._clock = clock

    def execute_and_wait(
        self,
        command: CommandBody,
        retries: int | None = None,
        deadline: float | None = None,
    ) -> CommandStatus:
        """Run a command and block until the server reports it completed.

        Args:
            command: Command to submit
            retries: Number of attempts, overriding the policy
            deadline: Absolute time on ``clock`` after which waiting stops

        Returns:
            The completed command status

        Raises:
            AuthorizationError: If the server rejects the API key
            CommandTimeoutError: If no attempt completed in time
        """
        attempts = retries if retries is not None else self.policy.retries

        for attempt in range(1, attempts + 1):
            self._check_deadline(command, deadline)
            try:
                status = self.api.execute_command(command)
            except AuthorizationError:
                raise
            except ApiError as e:
                logger.warning(f"submitting {command.name} failed ({attempt} of {attempts}): {e}")
                continue

            completed = self._poll(command, status, deadline)
            if completed is not None:
                logger.info(f"finished {command.name} successfully")
                return completed

            if attempt < attempts:
                logger.info(f"timeout, retrying another time: {attempt} of {attempts}")

        raise CommandTimeoutError(command.name)

    def _poll(
        self,
        command: CommandBody,
        status: CommandStatus,
        deadline: float | None,
    ) -> CommandStatus | None:
        """Poll one submitted command until completion or the wait budget runs out.

        Returns:
            The completed status, or None if the attempt timed out or failed
        """
        interval = self.policy.poll_interval
        started = self._clock()
        polls = 0

        while (polls + 1) * interval <= self.policy.max_wait:
            self._wait(command, interval, deadline)
            polls += 1

            try:
                status = self.api.get_command_status(status.id)
            except AuthorizationError:
                raise
            except ApiError as e:
                logger.warning(f"checking status of {command.name} failed: {e}")
            else:
                if status.is_completed:
                    return status
                if status.state.is_terminal_failure:
                    logger.warning(f"{command.name} ended with state {status.state.value}")
                    return None
                logger.debug(f"waiting response from {command.name} ({status.state.value})")

            if self._clock() - started >= self.policy.max_wait:
                break

        return None

    def _wait(self, command: CommandBody, interval: float, deadline: float | None) -> None:
        if deadline is not None:
            remaining = deadline - self._clock()
            if remaining <= 0:
                self._check_deadline(command, deadline)
            interval = min(interval, remaining)
        self._sleep(interval)

    def _check_deadline(self, command: CommandBody, deadline: float | None) -> None:
        if deadline is not None and self._clock() >= deadline:
            raise CommandTimeoutError(
                command.name, f"deadline passed while waiting for command {command.name}"
            )
