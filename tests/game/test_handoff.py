"""Tests for the single-slot blocking Handoff."""

import threading
import time

import pytest

from chessrules.game.handoff import Handoff, HandoffCancelled


class TestResolution:
    def test_deliver_then_wait(self) -> None:
        handoff: Handoff[int] = Handoff("test")
        assert handoff.deliver(7)
        assert handoff.done
        assert handoff.wait(0) == 7

    def test_first_resolution_wins(self) -> None:
        handoff: Handoff[int] = Handoff()
        assert handoff.deliver(1)
        assert not handoff.deliver(2)
        assert not handoff.cancel()
        assert handoff.wait() == 1
        assert not handoff.cancelled

    def test_cancel_then_wait(self) -> None:
        handoff: Handoff[int] = Handoff()
        assert handoff.cancel()
        assert handoff.cancelled
        assert not handoff.deliver(3)
        with pytest.raises(HandoffCancelled):
            handoff.wait()

    def test_resolved_factory(self) -> None:
        handoff = Handoff.resolved("E2E4", "white move")
        assert handoff.done
        assert handoff.label == "white move"
        assert handoff.wait(0) == "E2E4"


class TestBlocking:
    def test_timeout(self) -> None:
        handoff: Handoff[int] = Handoff("slow")
        with pytest.raises(TimeoutError):
            handoff.wait(0.01)
        assert not handoff.done

    def test_delivery_from_other_thread(self) -> None:
        handoff: Handoff[str] = Handoff()

        def answer() -> None:
            time.sleep(0.05)
            handoff.deliver("done")

        worker = threading.Thread(target=answer)
        worker.start()
        try:
            assert handoff.wait(5) == "done"
        finally:
            worker.join()

    def test_cancel_unblocks_waiter(self) -> None:
        handoff: Handoff[str] = Handoff()
        outcome: list[str] = []

        def wait() -> None:
            try:
                handoff.wait(5)
            except HandoffCancelled:
                outcome.append("cancelled")

        worker = threading.Thread(target=wait)
        worker.start()
        time.sleep(0.05)
        handoff.cancel()
        worker.join(5)
        assert outcome == ["cancelled"]

    def test_racing_deliveries_resolve_once(self) -> None:
        handoff: Handoff[int] = Handoff()
        results: list[bool] = []
        lock = threading.Lock()

        def race(value: int) -> None:
            accepted = handoff.deliver(value)
            with lock:
                results.append(accepted)

        threads = [threading.Thread(target=race, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results.count(True) == 1
        assert handoff.wait(0) in range(8)
