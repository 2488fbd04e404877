from __future__ import annotations

from code_editor.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    WhenClause,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "normal",
    token: str = "x",
    action_id: str = "core.test",
    when: tuple[WhenClause, ...] = (),
    priority: int = 0,
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        token=token,
        action_id=action_id,
        when=when,
        priority=priority,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_token() -> None:
    binding = make_binding("normal.x")
    registry = build_registry([binding])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("normal", "x")

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "core.test"


def test_resolver_misses_other_mode() -> None:
    registry = build_registry([make_binding("normal.x")])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("insert", "x")

    assert result.status == "miss"
    assert result.match is None


def test_resolver_normalizes_modifier_tokens() -> None:
    binding = make_binding("global.undo", mode="global", token="ctrl+z")
    registry = build_registry([binding])
    resolver = KeymapResolver(registry)

    assert resolver.resolve("global", "CTRL+z").status == "match"


def test_resolver_honors_when_clauses() -> None:
    gating = make_binding(
        "global.search",
        mode="global",
        token="ctrl+f",
        when=(WhenClause("search_active", expected=False),),
        action_id="core.enter_search",
    )
    registry = build_registry([gating])
    resolver = KeymapResolver(registry)

    hit = resolver.resolve("global", "ctrl+f", context={})
    assert hit.status == "match"

    miss = resolver.resolve("global", "ctrl+f", context={"search_active": True})
    assert miss.status == "miss"


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    miss = resolver.resolve("normal", "x")
    assert miss.status == "miss"

    new_binding = make_binding("normal.x", action_id="core.x")
    registry.register_action(make_action("core.x"))
    registry.register_binding(new_binding)

    match = resolver.resolve("normal", "x")
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == new_binding.id


def test_resolver_picks_binding_whose_flags_hold() -> None:
    active = make_binding("normal.x.active", action_id="core.active", when=(WhenClause("busy"),))
    idle = make_binding(
        "normal.x.idle", action_id="core.idle", when=(WhenClause.parse("!busy"),)
    )
    registry = build_registry([active, idle])
    resolver = KeymapResolver(registry)

    busy = resolver.resolve("normal", "x", context={"busy": True})
    quiet = resolver.resolve("normal", "x", context={})

    assert busy.match is not None and busy.match.action.id == "core.active"
    assert quiet.match is not None and quiet.match.action.id == "core.idle"
