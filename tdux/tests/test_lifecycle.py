"""
Tests for teardown.

destroy() disables propagation but keeps types registered.
"""

import pytest

from tdux.core import Emitter, LifecycleManager, ShouldEvent, TeardownPolicy, Channel


def _app(calls, policy=TeardownPolicy.WIRING_ONLY):
    def reducer(ev):
        calls.append(ev)
        return None

    return Emitter({"A": reducer, "B": reducer}, teardown_policy=policy)


def test_destroy_stops_reducers_and_did_events():
    calls, got = [], []
    app = _app(calls)
    app.on("A").subscribe(got.append)
    app.on("B").subscribe(got.append)

    app.destroy()
    app.dispatch("A", ShouldEvent(id=1, value=1))
    app.dispatch("B", ShouldEvent(id=1, value=1))

    assert calls == []
    assert got == []


def test_destroy_keeps_types_registered():
    app = _app([])
    app.destroy()

    assert app.is_registered("A")
    assert app.on("A") is not None
    assert app.destroyed


def test_destroy_is_idempotent():
    app = _app([])
    app.destroy()
    app.destroy()
    assert app.destroyed


def test_wiring_only_leaves_external_subscriptions_open():
    app = _app([])
    sub = app.on("A").subscribe(lambda ev: None)

    app.destroy()

    assert not sub.closed
    assert app.teardown_policy is TeardownPolicy.WIRING_ONLY


def test_all_subscriptions_policy_cancels_external_subscribers():
    app = _app([], policy=TeardownPolicy.ALL_SUBSCRIPTIONS)
    subs = [app.on("A").subscribe(lambda ev: None), app.on("B").subscribe(lambda ev: None)]

    app.destroy()

    assert all(s.closed for s in subs)


def test_register_after_destroy_rejected():
    app = _app([])
    app.destroy()

    with pytest.raises(RuntimeError):
        app.register("C", lambda ev: None)
    assert not app.is_registered("C")


def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv("TDUX_TEARDOWN_POLICY", "all")
    assert Emitter().teardown_policy is TeardownPolicy.ALL_SUBSCRIPTIONS

    monkeypatch.delenv("TDUX_TEARDOWN_POLICY")
    assert Emitter().teardown_policy is TeardownPolicy.WIRING_ONLY


def test_lifecycle_manager_counts_cancelled_external_subscriptions():
    should, did = Channel(), Channel()
    wiring = should.subscribe(did.publish)
    did.subscribe(lambda v: None)
    did.subscribe(lambda v: None)

    lifecycle = LifecycleManager("all")
    lifecycle.track(wiring, did)

    assert lifecycle.destroy() == 2
    assert wiring.closed
    assert lifecycle.destroy() == 0
