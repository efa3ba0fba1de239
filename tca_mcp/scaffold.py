"""Source generation for TCA features: stored templates and reducer scaffolds."""

from tca_mcp.catalog import get_template

_DEPENDENCY_BLOCK = """  @Dependency(\\.someClient) var someClient

"""


def get_template_source(name: str) -> str:
    """Return the stored Swift source for template ``name`` verbatim."""
    return get_template(name).code


def generate_reducer(feature_name: str, include_effects: bool = False) -> str:
    """
    Build a ``<feature_name>Feature`` reducer skeleton.

    ``feature_name`` is substituted as-is; callers must pass a valid Swift
    identifier. With ``include_effects`` a dependency declaration is placed
    ahead of the reducer body.
    """
    parts = [
        "@Reducer\n",
        f"struct {feature_name}Feature {{\n",
        "  struct State: Equatable {\n",
        "    // Add your state properties here\n",
        "  }\n",
        "\n",
        "  enum Action {\n",
        "    // Add your actions here\n",
        "  }\n",
        "\n",
    ]
    if include_effects:
        parts.append(_DEPENDENCY_BLOCK)
    parts.extend(
        [
            "  var body: some ReducerOf<Self> {\n",
            "    Reduce { state, action in\n",
            "      switch action {\n",
            "      // Handle actions here\n",
            "      }\n",
            "    }\n",
            "  }\n",
            "}",
        ]
    )
    return "".join(parts)
