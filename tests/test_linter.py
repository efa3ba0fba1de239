from tca_mcp.catalog import TEMPLATES
from tca_mcp.linter import (
    RULES,
    DirectSideEffectRule,
    LintFinding,
    Severity,
    lint,
)
from tca_mcp.scaffold import generate_reducer

EFFECT_MUTATION = """\
@Reducer
struct LoaderFeature {
  struct State: Equatable { var n = 0 }
  enum Action { case load, loaded }
  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .load:
        return .run { send in
          state.n += 1
          await send(.loaded)
        }
      case .loaded:
        return .none
      }
    }
  }
}"""

UNHANDLED = """\
enum Action {
  case increment
  case decrement
}
func reduce() {
  switch action {
  case .increment:
    break
  }
}"""


def test_empty_source_has_no_findings() -> None:
    assert lint("") == []


def test_builtin_templates_and_scaffolds_are_clean() -> None:
    for template in TEMPLATES.values():
        assert lint(template.code) == [], template.key
    assert lint(generate_reducer("Settings", include_effects=True)) == []


def test_state_without_equatable_is_an_error() -> None:
    source = "@Reducer\nstruct F {\n  struct State {\n    var n = 0\n  }\n}"
    assert lint(source) == [
        LintFinding(
            rule="state-equatable",
            severity=Severity.ERROR,
            message="State must conform to Equatable so the store can diff changes",
            line=3,
        )
    ]


def test_missing_reducer_macro_points_at_feature_struct() -> None:
    source = "struct CounterFeature {\n  struct State: Equatable {}\n  enum Action { case tap }\n}"
    findings = lint(source)
    assert [(f.rule, f.severity, f.line) for f in findings] == [
        ("reducer-macro", Severity.WARNING, 1)
    ]


def test_state_mutation_inside_effect() -> None:
    findings = lint(EFFECT_MUTATION)
    assert [(f.rule, f.severity, f.line) for f in findings] == [
        ("effect-state-mutation", Severity.ERROR, 10)
    ]


def test_state_comparison_inside_effect_is_not_a_mutation() -> None:
    source = EFFECT_MUTATION.replace("state.n += 1", "if state.n == 1 { }")
    assert lint(source) == []


def test_long_running_effect_requires_cancellation() -> None:
    source = (
        "return .run { send in\n"
        "  while true {\n"
        "    try await clock.sleep(for: .seconds(1))\n"
        "    await send(.tick)\n"
        "  }\n"
        "}"
    )
    findings = lint(source)
    assert [(f.rule, f.severity, f.line) for f in findings] == [
        ("uncancellable-effect", Severity.ERROR, 2)
    ]
    assert lint(source + "\n.cancellable(id: CancelID.timer)") == []


def test_direct_side_effects_are_warnings() -> None:
    source = (
        "let data = try await URLSession.shared.data(from: url)\n"
        "DispatchQueue.main.async { }\n"
        "Task { await work() }"
    )
    findings = lint(source)
    assert [(f.rule, f.severity, f.line) for f in findings] == [
        ("direct-side-effect", Severity.WARNING, 1),
        ("direct-side-effect", Severity.WARNING, 2),
        ("direct-side-effect", Severity.WARNING, 3),
    ]
    assert "'URLSession.shared'" in findings[0].message
    assert "'DispatchQueue.main'" in findings[1].message
    assert "'Task'" in findings[2].message


def test_commented_out_code_is_ignored() -> None:
    assert lint("// URLSession.shared.data(from: url)\n// while true {") == []


def test_unhandled_action_is_reported_at_declaration() -> None:
    findings = lint(UNHANDLED)
    assert [(f.rule, f.line) for f in findings] == [("unhandled-action", 3)]
    assert findings[0].message == "Action '.decrement' is never handled in 'switch action'"


def test_default_arm_handles_remaining_actions() -> None:
    assert lint(UNHANDLED.replace("    break\n", "    break\n  default:\n    break\n")) == []


def test_findings_follow_rule_order_then_line() -> None:
    source = (
        "struct F {\n"
        "  struct State { }\n"
        "  enum Action { case a }\n"
        "  func f() { Task { } }\n"
        "  func g() { Task { } }\n"
        "}"
    )
    findings = lint(source)
    assert [(f.rule, f.line) for f in findings] == [
        ("state-equatable", 2),
        ("reducer-macro", 1),
        ("direct-side-effect", 4),
        ("direct-side-effect", 5),
    ]
    assert lint(source) == findings


def test_rules_are_independent() -> None:
    source = "struct State { }\nDispatchQueue.main.async { }"
    alone = lint(source, rules=(DirectSideEffectRule(),))
    combined = [f for f in lint(source, rules=RULES) if f.rule == "direct-side-effect"]
    assert alone == combined
    assert len(alone) == 1


def test_state_conformance_list_may_span_lines() -> None:
    source = "@Reducer\nstruct F {\n  struct State:\n    Equatable {\n  }\n}"
    assert lint(source) == []

    missing = "@Reducer\nstruct F {\n  struct State:\n    Sendable {\n  }\n}"
    assert [(f.rule, f.line) for f in lint(missing)] == [("state-equatable", 3)]


def test_reducer_builder_is_not_the_reducer_macro() -> None:
    source = (
        "struct F {\n"
        "  struct State: Equatable {}\n"
        "  enum Action { case a }\n"
        "  @ReducerBuilder<State, Action> var core: some ReducerOf<F> { EmptyReducer() }\n"
        "}"
    )
    assert [(f.rule, f.line) for f in lint(source)] == [("reducer-macro", 1)]
