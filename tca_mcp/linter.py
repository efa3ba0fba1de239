"""
Rule-based checker for Swift TCA feature code.

Each rule is an independent object that scans the submitted text and yields
``(line, message)`` pairs. ``lint`` runs the rules in ``RULES`` order and
returns findings grouped by rule, ascending by line within a rule.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class LintFinding:
    """One reported issue. ``line`` is 1-based."""

    rule: str
    severity: Severity
    message: str
    line: int


_COMMENT = re.compile(r"//.*$")
_STRUCT_DECL = re.compile(r"\bstruct\s+(\w+)([^{]*)")
_STATE_DECL = re.compile(r"\bstruct\s+State\b")
_REDUCER_MACRO = re.compile(r"@Reducer\b")
_ENUM_ACTION = re.compile(r"\benum\s+Action\b[^{]*\{")
_RUN_EFFECT = re.compile(r"\.run\s*\{")
_STATE_ASSIGNMENT = re.compile(r"\bstate\.\w+(?:\.\w+|\[[^\]]*\])*\s*(?:[-+*/]?=)(?!=)")
_LONG_RUNNING = re.compile(r"\bwhile\s+true\b|\bfor\s+await\b")
_CASE_PATTERN = re.compile(r"(?:^|[\s,(])\.(\w+)")
_PARENTHESIZED = re.compile(r"\([^()]*\)")
_SIDE_EFFECTS = re.compile(
    r"URLSession\.\w+"
    r"|DispatchQueue\.\w+"
    r"|\bTask\.detached\b"
    r"|\bTask\s*\{"
    r"|Timer\.scheduledTimer\b"
    r"|UserDefaults\.standard\b"
)


def _strip_comments(source: str) -> list[str]:
    return [_COMMENT.sub("", line) for line in source.splitlines()]


def _block(lines: Sequence[str], index: int, column: int) -> Iterator[tuple[int, str]]:
    """
    Yield ``(line_index, text)`` for the brace block opened at ``lines[index][column]``.

    The first yielded text is the remainder of the opening line after the
    brace. Iteration stops once the matching close brace is consumed.
    """
    depth = 0
    for current in range(index, len(lines)):
        text = lines[current][column + 1 :] if current == index else lines[current]
        if current == index:
            depth = 1
        segment = []
        for char in text:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    break
            segment.append(char)
        yield current, "".join(segment)
        if depth == 0:
            return


class LintRule(ABC):
    """A single, stateless check over the whole source text."""

    rule_id: str
    severity: Severity

    @abstractmethod
    def matches(self, lines: Sequence[str]) -> Iterator[tuple[int, str]]:
        """Yield ``(0-based line index, message)`` for each offending line."""

    def check(self, lines: Sequence[str]) -> list[LintFinding]:
        hits = sorted(set(self.matches(lines)))
        return [
            LintFinding(rule=self.rule_id, severity=self.severity, message=message, line=index + 1)
            for index, message in hits
        ]


class StateEquatableRule(LintRule):
    rule_id = "state-equatable"
    severity = Severity.ERROR

    def matches(self, lines):
        for index, line in enumerate(lines):
            match = _STATE_DECL.search(line)
            if not match:
                continue
            # The conformance list runs up to the opening brace, possibly across lines.
            header = [line[match.end() :]]
            current = index
            while "{" not in header[-1] and current + 1 < len(lines):
                current += 1
                header.append(lines[current])
            conformances = " ".join(header).split("{", 1)[0]
            if "Equatable" not in conformances:
                yield index, "State must conform to Equatable so the store can diff changes"


class ReducerMacroRule(LintRule):
    rule_id = "reducer-macro"
    severity = Severity.WARNING

    def matches(self, lines):
        if any(_REDUCER_MACRO.search(line) for line in lines):
            return
        structs = [
            (index, match.group(1))
            for index, line in enumerate(lines)
            if (match := _STRUCT_DECL.search(line))
        ]
        has_state = any(name == "State" for _, name in structs)
        has_action = any(_ENUM_ACTION.search(line) for line in lines)
        if not (has_state and has_action):
            return
        features = [index for index, name in structs if name != "State"]
        index = features[0] if features else next(i for i, name in structs if name == "State")
        yield index, (
            "Feature declares State and Action without @Reducer; "
            "annotate the feature struct with @Reducer"
        )


class EffectStateMutationRule(LintRule):
    rule_id = "effect-state-mutation"
    severity = Severity.ERROR

    def matches(self, lines):
        for index, line in enumerate(lines):
            match = _RUN_EFFECT.search(line)
            if not match:
                continue
            for current, text in _block(lines, index, match.end() - 1):
                if _STATE_ASSIGNMENT.search(text):
                    yield current, (
                        "State is mutated inside a .run effect; send an action back "
                        "into the reducer and mutate state there"
                    )


class UncancellableEffectRule(LintRule):
    rule_id = "uncancellable-effect"
    severity = Severity.ERROR

    def matches(self, lines):
        if any(".cancellable(" in line for line in lines):
            return
        for index, line in enumerate(lines):
            match = _LONG_RUNNING.search(line)
            if match:
                yield index, (
                    f"Long-running effect ('{match.group(0)}') can never be stopped; "
                    "mark it with .cancellable(id:) and return .cancel(id:) to end it"
                )


class DirectSideEffectRule(LintRule):
    rule_id = "direct-side-effect"
    severity = Severity.WARNING

    def matches(self, lines):
        for index, line in enumerate(lines):
            match = _SIDE_EFFECTS.search(line)
            if match:
                call = match.group(0).rstrip("{").strip()
                yield index, (
                    f"Direct side effect '{call}' bypasses the effect boundary; "
                    "wrap it in a @Dependency client and call it from .run"
                )


class UnhandledActionRule(LintRule):
    rule_id = "unhandled-action"
    severity = Severity.WARNING

    def matches(self, lines):
        if not any("switch action" in line for line in lines):
            return
        declared: list[tuple[int, str]] = []
        in_action: set[int] = set()
        for index, line in enumerate(lines):
            match = _ENUM_ACTION.search(line)
            if not match:
                continue
            for current, text in _block(lines, index, match.end() - 1):
                in_action.add(current)
                declared.extend((current, name) for name in _case_names(text))

        handled: set[str] = set()
        for index, line in enumerate(lines):
            stripped = line.strip()
            if index in in_action:
                continue
            if stripped.startswith("default:"):
                return
            if stripped.startswith("case "):
                handled.update(_CASE_PATTERN.findall(stripped[len("case") :]))

        for index, name in declared:
            if name not in handled:
                yield index, f"Action '.{name}' is never handled in 'switch action'"


def _case_names(text: str) -> list[str]:
    stripped = text.strip()
    if not stripped.startswith("case "):
        return []
    body = stripped[len("case ") :]
    while _PARENTHESIZED.search(body):
        body = _PARENTHESIZED.sub("", body)
    names = []
    for part in body.split(","):
        match = re.match(r"\s*(\w+)", part)
        if match:
            names.append(match.group(1))
    return names


RULES: tuple[LintRule, ...] = (
    StateEquatableRule(),
    ReducerMacroRule(),
    EffectStateMutationRule(),
    UncancellableEffectRule(),
    DirectSideEffectRule(),
    UnhandledActionRule(),
)


def lint(source: str, rules: Sequence[LintRule] = RULES) -> list[LintFinding]:
    """Run every rule over ``source`` and concatenate their findings in rule order."""
    lines = _strip_comments(source)
    findings: list[LintFinding] = []
    for rule in rules:
        findings.extend(rule.check(lines))
    return findings
