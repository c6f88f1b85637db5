"""Summation business logic."""

from typing import List, Optional, TextIO

import structlog

from ..exceptions import EndOfInputError
from ..models.schemas import InputLine, SummationResult
from ..utils.parsing import parse_operands, read_line
from .operation_service import OperationService

logger = structlog.get_logger(__name__)


class SummationService:
    """Reads operand lines, sums them and writes the results."""

    def __init__(self, operation_service: Optional[OperationService] = None, operation_name: str = "sum"):
        self.operation_service = operation_service or OperationService()
        self.operation_name = operation_name

    def sum_line(self, line: InputLine) -> SummationResult:
        """Parse a single line and sum its first two tokens."""
        a, b = parse_operands(line)
        result = self.operation_service.execute_operation(self.operation_name, a, b)
        logger.debug("Line summed", line=line.number, a=a, b=b, result=result)
        return SummationResult(line_number=line.number, a=a, b=b, result=result)

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """Sum the first line of stdin and write the result to stdout."""
        summation = self.sum_line(read_line(stdin))
        stdout.write(summation.render())
        stdout.flush()
        return summation.result

    def run_all(self, stdin: TextIO, stdout: TextIO) -> List[int]:
        """
        Sum every line of stdin until end of input.

        Blank lines are skipped. Nothing is written unless every line is
        valid.

        Raises:
            EndOfInputError: If the stream holds no non-blank line
            SummationError: On the first invalid line
        """
        summations: List[SummationResult] = []
        number = 0

        while True:
            number += 1
            try:
                line = read_line(stdin, number=number)
            except EndOfInputError:
                break
            if line.is_blank():
                continue
            summations.append(self.sum_line(line))

        if not summations:
            raise EndOfInputError("No non-blank input line available")

        stdout.write("".join(s.render() for s in summations))
        stdout.flush()
        logger.debug("All lines summed", lines=len(summations))
        return [s.result for s in summations]
