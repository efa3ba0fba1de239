"""
Static TCA documentation and template catalog.

Both tables are built once at import time and exposed as read-only mappings.
Lookups are exact-match; search is a linear, case-insensitive substring scan.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tca_mcp.errors import NotFoundError


@dataclass(frozen=True, slots=True)
class DocumentationEntry:
    """A single documentation topic served as an MCP resource."""

    key: str
    title: str
    description: str
    content: str

    def summary(self) -> dict[str, str]:
        return {"key": self.key, "title": self.title, "description": self.description}


@dataclass(frozen=True, slots=True)
class Template:
    """A ready-made feature implementation returned by get-template."""

    key: str
    description: str
    code: str

    def summary(self) -> dict[str, str]:
        return {"key": self.key, "description": self.description}


_REDUCER_PATTERN = r'''# Reducer Pattern

The Reducer is the heart of TCA - it contains your feature's business logic.

## Structure

```swift
@Reducer
struct CounterFeature {
  struct State: Equatable {
    var count = 0
  }

  enum Action {
    case increment
    case decrement
  }

  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .increment:
        state.count += 1
        return .none
      case .decrement:
        state.count -= 1
        return .none
      }
    }
  }
}
```

## Key Concepts

- **State**: Immutable data structure representing feature state
- **Action**: Enum of all possible user/system interactions
- **Reduce**: Function that updates state based on actions
- **Effects**: Return .run { } for async operations

## Best Practices

1. Keep State flat and equatable
2. Make Actions specific and atomic
3. Never mutate state directly (TCA handles it)
4. Return .none for simple state updates
5. Use .run for side effects
'''

_STORE_SETUP = r'''# Store Setup

The Store is the runtime that powers your feature.

## Creating a Store

```swift
let store = Store(initialState: CounterFeature.State()) {
  CounterFeature()
}
```

## In SwiftUI (Modern TCA 1.0+)

```swift
@main
struct MyApp: App {
  let store = Store(initialState: AppFeature.State()) {
    AppFeature()
  }

  var body: some Scene {
    WindowGroup {
      RootView(store: store)
    }
  }
}
```

## Passing to Views

```swift
struct ContentView: View {
  @Bindable var store: StoreOf<CounterFeature>

  var body: some View {
    VStack {
      Text("\(store.count)")
      Button("Increment") { store.send(.increment) }
    }
  }
}
```

## Key Points

- Store is generic over feature Reducer
- Pass .initialState and reducer closure
- Use @Bindable in views (TCA 1.0+)
- Store handles all state management
'''

_EFFECTS_ASYNC = r'''# Effects & Async Operations

Effects handle side effects like API calls, timers, and other async work.

## Basic Effect Pattern

```swift
enum Action {
  case fetchUser
  case userResponse(Result<User, Error>)
}

var body: some ReducerOf<Self> {
  Reduce { state, action in
    switch action {
    case .fetchUser:
      state.isLoading = true
      return .run { send in
        let user = try await userClient.fetch()
        await send(.userResponse(.success(user)))
      } catch: { error, send in
        await send(.userResponse(.failure(error)))
      }

    case .userResponse(let result):
      state.isLoading = false
      state.user = try? result.get()
      return .none
    }
  }
}
```

## Effect Types

- `.none` - No side effects
- `.run` - Async operation with error handling
- `.send` - Send multiple actions
- `.merge` - Combine multiple effects
- `.cancel` - Cancel running effects

## Dependencies

```swift
@Dependency(\.userClient) var userClient
```

Use dependency injection for testability.
'''

_NAVIGATION_STACK = r'''# Stack Navigation

Push multiple screens onto a navigation stack.

## State Setup

```swift
@Reducer
struct AppFeature {
  struct State: Equatable {
    var path = StackNavigationState<Path.State>()
  }

  @Reducer(state: .equatable)
  enum Path {
    case detail(DetailFeature)
    case edit(EditFeature)
  }
}
```

## Actions

```swift
enum Action {
  case path(StackAction<Path.State, Path.Action>)
}
```

## Reducer

```swift
var body: some ReducerOf<Self> {
  Reduce { state, action in
    // Handle root actions
    return .none
  }
  .forEach(\.path, action: \.path) {
    Path()
  }
}
```

## View

```swift
struct AppView: View {
  @Bindable var store: StoreOf<AppFeature>

  var body: some View {
    NavigationStack(
      path: $store.scope(state: \.path, action: \.path)
    ) { store in
      RootView()
    } destination: { store in
      switch store.state {
      case .detail:
        DetailView(store: store.scope(state: \.detail, action: \.detail))
      case .edit:
        EditView(store: store.scope(state: \.edit, action: \.edit))
      }
    }
  }
}
```

## Key Features

- Multiple screens on back stack
- Type-safe navigation
- Full reducer control
- Automatic state management
'''

_PRESENTATION_STATE = r'''# Presentation State

Handle modals and sheets with PresentationState.

## State

```swift
@Reducer
struct AppFeature {
  struct State: Equatable {
    @PresentationState var detail: DetailFeature.State?
  }

  enum Action {
    case detail(PresentationAction<DetailFeature.Action>)
    case showDetail
    case dismissDetail
  }
}
```

## Reducer

```swift
var body: some ReducerOf<Self> {
  Reduce { state, action in
    switch action {
    case .showDetail:
      state.detail = DetailFeature.State()
      return .none
    case .dismissDetail:
      state.detail = nil
      return .none
    case .detail:
      return .none
    }
  }
  .ifLet(\.$detail, action: \.detail) {
    DetailFeature()
  }
}
```

## View

```swift
.sheet(
  item: $store.scope(state: \.detail, action: \.detail)
) { store in
  DetailView(store: store)
}
```

## Variants

- `.sheet` for sheets
- `.fullScreenCover` for full screen
- `.popover` for popovers
'''

_TESTING = r'''# Testing TCA Features

TCA makes testing straightforward with TestStore.

## Basic Test

```swift
@MainActor
func testIncrement() async {
  let store = TestStore(
    initialState: CounterFeature.State(),
    reducer: { CounterFeature() }
  )

  await store.send(.increment) { state in
    state.count = 1
  }
}
```

## Testing Effects

```swift
func testFetchUser() async {
  let store = TestStore(
    initialState: AppFeature.State(),
    reducer: { AppFeature() }
  ) {
    $0.userClient = .testValue
  }

  await store.send(.fetchUser)

  await store.receive(\.userResponse) { state in
    state.user = .mock
  }
}
```

## Key Features

- Verify exact state changes
- Assert on received actions
- Mock dependencies
- Time-travel debugging
- Deterministic testing

## Tips

1. Use @MainActor for UI tests
2. Test one action path at a time
3. Mock all external dependencies
4. Verify state diffs precisely
'''

_TREE_NAVIGATION = r'''# Tree-Based Navigation

Tree navigation allows hierarchical drilling down through nested screens.

## Use Cases

- File browsers with nested folders
- Category → Subcategory → Item selection
- Multi-level menus
- Hierarchical list navigation

## State Setup

```swift
@Reducer
struct TreeFeature {
  struct State: Equatable {
    var path = StackNavigationState<Path.State>()
    var items: [TreeItem] = []
  }

  @Reducer(state: .equatable)
  enum Path {
    case itemDetail(ItemDetailFeature)
    case subTree(SubTreeFeature)
  }
}

struct TreeItem: Identifiable, Equatable {
  let id: UUID
  var name: String
  var children: [TreeItem]?
}
```

## Actions

```swift
enum Action {
  case path(StackAction<Path.State, Path.Action>)
  case loadItems
  case drillDown(TreeItem)
  case popBack
}
```

## Reducer

```swift
var body: some ReducerOf<Self> {
  Reduce { state, action in
    switch action {
    case .loadItems:
      state.items = loadTreeData()
      return .none

    case .drillDown(let item):
      // Push new screen onto stack
      if item.children != nil {
        state.path.append(.subTree(SubTreeFeature.State(item: item)))
      } else {
        state.path.append(.itemDetail(ItemDetailFeature.State(item: item)))
      }
      return .none

    case .popBack:
      state.path.removeLast()
      return .none

    case .path:
      return .none
    }
  }
  .forEach(\.path, action: \.path) {
    Path()
  }
}
```

## View

```swift
struct TreeView: View {
  @Bindable var store: StoreOf<TreeFeature>

  var body: some View {
    NavigationStack(path: $store.scope(state: \.path, action: \.path)) {
      List(store.items) { item in
        Button {
          store.send(.drillDown(item))
        } label: {
          HStack {
            Image(systemName: item.children != nil ? "folder" : "doc")
            Text(item.name)
          }
        }
      }
      .navigationTitle("Items")
    } destination: { store in
      switch store.case {
      case let .itemDetail(store):
        ItemDetailView(store: store)
      case let .subTree(store):
        SubTreeView(store: store)
      }
    }
  }
}
```

## Key Differences vs Stack Navigation

| Aspect | Stack | Tree |
|--------|-------|------|
| Structure | Linear path | Hierarchical |
| Navigation | Push/Pop | Drill-down/Back |
| Data | Flat | Nested (recursive) |
| Use Case | Sequential screens | Hierarchical data |

## Tips

1. Use recursive data structures for tree items
2. Differentiate between leaf and branch items
3. Load children lazily for performance
4. Maintain path history for back navigation
5. Consider pagination for large trees
'''

_COUNTER = r'''@Reducer
struct CounterFeature {
  struct State: Equatable {
    var count = 0
  }

  enum Action {
    case increment
    case decrement
    case reset
  }

  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .increment:
        state.count += 1
        return .none
      case .decrement:
        state.count -= 1
        return .none
      case .reset:
        state.count = 0
        return .none
      }
    }
  }
}

struct CounterView: View {
  @Bindable var store: StoreOf<CounterFeature>

  var body: some View {
    VStack(spacing: 20) {
      Text("\(store.count)")
        .font(.largeTitle)
        .fontWeight(.bold)

      HStack(spacing: 16) {
        Button("-") { store.send(.decrement) }
        Button("Reset") { store.send(.reset) }
        Button("+") { store.send(.increment) }
      }
    }
    .padding()
  }
}'''

_API_CALL = r'''@Reducer
struct UserFeature {
  struct State: Equatable {
    var user: User?
    var isLoading = false
    var error: String?
  }

  enum Action {
    case loadUser
    case userResponse(Result<User, Error>)
  }

  @Dependency(\.userClient) var userClient

  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .loadUser:
        state.isLoading = true
        state.error = nil
        return .run { send in
          let user = try await userClient.fetchUser()
          await send(.userResponse(.success(user)))
        } catch: { error, send in
          await send(.userResponse(.failure(error)))
        }

      case .userResponse(let result):
        state.isLoading = false
        switch result {
        case .success(let user):
          state.user = user
          return .none
        case .failure(let error):
          state.error = error.localizedDescription
          return .none
        }
      }
    }
  }
}

struct UserView: View {
  @Bindable var store: StoreOf<UserFeature>

  var body: some View {
    VStack {
      if store.isLoading {
        ProgressView()
      } else if let user = store.user {
        Text(user.name)
      } else if let error = store.error {
        Text("Error: \(error)")
      }
    }
    .onAppear { store.send(.loadUser) }
  }
}'''

_LIST = r'''@Reducer
struct ListFeature {
  struct State: Equatable {
    var items: IdentifiedArrayOf<Item> = []
  }

  enum Action {
    case addItem
    case removeItem(id: Item.ID)
    case itemUpdated(Item.ID, Item)
  }

  @Dependency(\.uuid) var uuid

  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .addItem:
        state.items.append(Item(id: uuid(), title: "New Item"))
        return .none

      case .removeItem(let id):
        state.items.remove(id: id)
        return .none

      case .itemUpdated(let id, let item):
        state.items[id: id] = item
        return .none
      }
    }
  }
}

struct Item: Identifiable, Equatable {
  let id: UUID
  var title: String
}

struct ListView: View {
  @Bindable var store: StoreOf<ListFeature>

  var body: some View {
    List {
      ForEach(store.items) { item in
        Text(item.title)
      }
      .onDelete { offsets in
        offsets.forEach { index in
          store.send(.removeItem(id: store.items[index].id))
        }
      }
    }
    .toolbar {
      Button("Add") { store.send(.addItem) }
    }
  }
}'''

_TIMER = r'''@Reducer
struct TimerFeature {
  struct State: Equatable {
    var seconds = 0
    var isRunning = false
  }

  enum Action {
    case startTimer
    case stopTimer
    case tick
  }

  enum CancelID { case timer }

  @Dependency(\.continuousClock) var clock

  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .startTimer:
        state.isRunning = true
        return .run { send in
          for await _ in clock.timer(interval: .seconds(1)) {
            await send(.tick)
          }
        }
        .cancellable(id: CancelID.timer)

      case .stopTimer:
        state.isRunning = false
        return .cancel(id: CancelID.timer)

      case .tick:
        state.seconds += 1
        return .none
      }
    }
  }
}

struct TimerView: View {
  @Bindable var store: StoreOf<TimerFeature>

  var body: some View {
    VStack(spacing: 20) {
      Text("\(store.seconds)s")
        .font(.largeTitle)

      if store.isRunning {
        Button("Stop") { store.send(.stopTimer) }
      } else {
        Button("Start") { store.send(.startTimer) }
      }
    }
  }
}'''


def _index(entries):
    return MappingProxyType({entry.key: entry for entry in entries})


DOCS: Mapping[str, DocumentationEntry] = _index(
    (
        DocumentationEntry(
            "reducer-pattern",
            "Reducer Pattern",
            "Core business logic pattern for TCA features",
            _REDUCER_PATTERN,
        ),
        DocumentationEntry(
            "store-setup",
            "Store Setup",
            "How to initialize and manage TCA stores",
            _STORE_SETUP,
        ),
        DocumentationEntry(
            "effects-async",
            "Effects & Async",
            "Handling side effects and async operations",
            _EFFECTS_ASYNC,
        ),
        DocumentationEntry(
            "navigation-stack",
            "Stack Navigation",
            "Implement stack-based navigation with TCA",
            _NAVIGATION_STACK,
        ),
        DocumentationEntry(
            "presentation-state",
            "Presentation State",
            "Modal and sheet presentations with TCA",
            _PRESENTATION_STATE,
        ),
        DocumentationEntry(
            "testing",
            "Testing",
            "Test TCA features with TestStore",
            _TESTING,
        ),
        DocumentationEntry(
            "tree-navigation",
            "Tree-Based Navigation",
            "Hierarchical tree navigation with drill-down capabilities",
            _TREE_NAVIGATION,
        ),
    )
)

TEMPLATES: Mapping[str, Template] = _index(
    (
        Template("counter", "Simple counter feature", _COUNTER),
        Template("api-call", "API call with loading state", _API_CALL),
        Template("list", "List with add/delete items", _LIST),
        Template("timer", "Timer with start/stop", _TIMER),
    )
)

TEMPLATE_NAMES: tuple[str, ...] = tuple(TEMPLATES)


def list_docs() -> list[dict[str, str]]:
    """Return every documentation entry summary in declaration order."""
    return [entry.summary() for entry in DOCS.values()]


def read_doc(key: str) -> DocumentationEntry:
    """Return the documentation entry stored under ``key``."""
    entry = DOCS.get(key)
    if entry is None:
        raise NotFoundError(f"Documentation not found: {key}")
    return entry


def search_docs(query: str) -> list[dict[str, str]]:
    """
    Return summaries of entries whose key, title or description contain ``query``.

    Matching is case-insensitive. An empty query matches every entry; no
    matches yields an empty list.
    """
    needle = query.lower()
    return [
        entry.summary()
        for entry in DOCS.values()
        if needle in entry.key.lower()
        or needle in entry.title.lower()
        or needle in entry.description.lower()
    ]


def list_templates() -> list[dict[str, str]]:
    """Return every template summary in declaration order."""
    return [template.summary() for template in TEMPLATES.values()]


def get_template(key: str) -> Template:
    """Return the template stored under ``key``."""
    template = TEMPLATES.get(key)
    if template is None:
        raise NotFoundError(f"Unknown template: {key}")
    return template
