"""Optional indentation validation for indentation trees.

Navigation never checks the indentation invariant: a line that is not
exactly one unit deeper than its parent yields silently wrong answers. This
module provides a separate pass that reports such lines so callers can
decide whether to trust query results. In strict mode the tree value runs it
on construction and raises ``MalformedTreeError``.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from indent_tree.shared import DiagnosticEntry, DiagnosticSeverity, TreeConfig, get_logger
from indent_tree.text.lines import indent_width_at, is_valid_address

if TYPE_CHECKING:
    from indent_tree.tree.model import IndentTree

MS_PER_SECOND = 1000


class TreeError(Exception):
    """Base exception for tree errors raised in strict mode."""


class ValidationIssueType(Enum):
    """Types of validation issues that can be detected."""

    NOT_MULTIPLE_OF_UNIT = "not_multiple_of_unit"
    INDENT_JUMP = "indent_jump"
    FOREIGN_INDENT_CHARACTER = "foreign_indent_character"
    BLANK_LINE = "blank_line"
    EMPTY_LABEL = "empty_label"
    ADDRESS_OUT_OF_RANGE = "address_out_of_range"


@dataclass
class ValidationIssue:
    """Single validation issue with detailed information."""

    issue_type: ValidationIssueType
    severity: DiagnosticSeverity
    message: str
    address: Optional[int] = None
    suggested_fix: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        """Validate issue data."""
        if not self.message:
            raise ValueError("Validation issue message cannot be empty")

    def to_diagnostic(self, correlation_id: Optional[str] = None) -> DiagnosticEntry:
        """Convert the issue into a generic diagnostic entry."""
        details = dict(self.details or {})
        details["issue_type"] = self.issue_type.value
        if self.suggested_fix:
            details["suggested_fix"] = self.suggested_fix
        return DiagnosticEntry(
            severity=self.severity,
            message=self.message,
            component="indentation_validator",
            address=self.address,
            details=details,
            correlation_id=correlation_id,
        )


@dataclass
class ValidationResult:
    """Validation result with detailed findings."""

    issues: List[ValidationIssue] = field(default_factory=list)
    lines_validated: int = 0
    processing_time_ms: float = 0.0

    @property
    def success(self) -> bool:
        """True when no error-level issue was found."""
        return self.error_count == 0

    @property
    def error_count(self) -> int:
        """Get number of error-level issues."""
        return len([
            issue for issue in self.issues
            if issue.severity in (DiagnosticSeverity.ERROR, DiagnosticSeverity.CRITICAL)
        ])

    @property
    def warning_count(self) -> int:
        """Get number of warning-level issues."""
        return len([
            issue for issue in self.issues
            if issue.severity == DiagnosticSeverity.WARNING
        ])

    def get_issues_by_type(self, issue_type: ValidationIssueType) -> List[ValidationIssue]:
        """Get validation issues of specific type."""
        return [issue for issue in self.issues if issue.issue_type == issue_type]

    def summary(self) -> Dict[str, Any]:
        """Return a JSON-friendly summary of the result."""
        return {
            "success": self.success,
            "lines_validated": self.lines_validated,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "issues": [issue.to_diagnostic().to_dict() for issue in self.issues],
        }


class MalformedTreeError(TreeError):
    """Raised in strict mode when the buffer breaks the indentation invariant."""

    def __init__(self, result: ValidationResult) -> None:
        first = next(issue for issue in result.issues
                     if issue.severity in (DiagnosticSeverity.ERROR,
                                           DiagnosticSeverity.CRITICAL))
        super().__init__(
            f"Malformed indentation ({result.error_count} error(s)); "
            f"first at line {first.address}: {first.message}"
        )
        self.result = result


class AddressOutOfRangeError(TreeError):
    """Raised in strict mode when an address does not denote a line or the root."""

    def __init__(self, address: int, line_count: int) -> None:
        super().__init__(f"Address {address} is outside 0..{line_count}")
        self.address = address
        self.line_count = line_count


class IndentationValidator:
    """Checks a tree buffer against the indentation invariant.

    A well-formed buffer has every indentation made only of the configured
    indentation character, every width a multiple of the unit, and every
    line at most one unit deeper than the line before it.
    """

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self.config = config or TreeConfig()
        self.logger = get_logger(__name__, self.config.correlation_id,
                                 "indentation_validator")

    def validate(self, tree: "IndentTree") -> ValidationResult:
        """Validate every line of ``tree``; never raises."""
        start_time = time.time()
        result = ValidationResult()
        unit = self.config.indent_unit
        indent_char = self.config.indent_char
        # The first line may only sit at the root level.
        previous_indent = -unit

        for address, line in enumerate(tree.lines, start=1):
            result.lines_validated += 1

            if line == "":
                result.issues.append(ValidationIssue(
                    issue_type=ValidationIssueType.BLANK_LINE,
                    severity=DiagnosticSeverity.WARNING,
                    message="Blank line ends every enclosing block",
                    address=address,
                    suggested_fix="Remove the blank line",
                ))
                previous_indent = 0
                continue

            if not line.strip():
                result.issues.append(ValidationIssue(
                    issue_type=ValidationIssueType.EMPTY_LABEL,
                    severity=DiagnosticSeverity.WARNING,
                    message="Whitespace-only line is a node with an empty label",
                    address=address,
                    suggested_fix="Give the node a label or remove the line",
                ))

            indent = indent_width_at(tree.lines, address, indent_char)
            leading = line[:len(line) - len(line.lstrip())]
            if len(leading) != indent:
                result.issues.append(ValidationIssue(
                    issue_type=ValidationIssueType.FOREIGN_INDENT_CHARACTER,
                    severity=DiagnosticSeverity.ERROR,
                    message=f"Indentation mixes in characters other than {indent_char!r}",
                    address=address,
                    suggested_fix=f"Indent with {indent_char!r} only",
                    details={"leading_whitespace": leading},
                ))

            if indent % unit:
                result.issues.append(ValidationIssue(
                    issue_type=ValidationIssueType.NOT_MULTIPLE_OF_UNIT,
                    severity=DiagnosticSeverity.ERROR,
                    message=f"Indentation width {indent} is not a multiple of {unit}",
                    address=address,
                    details={"indent": indent, "indent_unit": unit},
                ))
            elif indent > previous_indent + unit:
                result.issues.append(ValidationIssue(
                    issue_type=ValidationIssueType.INDENT_JUMP,
                    severity=DiagnosticSeverity.ERROR,
                    message=(f"Indentation width {indent} skips a level "
                             f"(at most {previous_indent + unit} allowed)"),
                    address=address,
                    suggested_fix=f"Indent by {previous_indent + unit}",
                    details={"indent": indent, "previous_indent": previous_indent},
                ))

            previous_indent = indent

        result.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
        if result.issues:
            self.logger.debug(
                "Indentation validation found issues",
                extra={
                    "error_count": result.error_count,
                    "warning_count": result.warning_count,
                }
            )
        return result

    def check_address(self, tree: "IndentTree", address: int) -> Optional[ValidationIssue]:
        """Return an issue when ``address`` is neither the root nor a real line."""
        if address == 0 or is_valid_address(tree.lines, address):
            return None
        return ValidationIssue(
            issue_type=ValidationIssueType.ADDRESS_OUT_OF_RANGE,
            severity=DiagnosticSeverity.ERROR,
            message=f"Address {address} is outside 0..{len(tree.lines)}",
            address=address,
        )
