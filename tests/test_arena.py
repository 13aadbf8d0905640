from dodge.arena import Arena


def test_start_replaces_previous_tick(surface, scheduler):
    ticks = []
    arena = Arena(surface, scheduler, lambda: ticks.append(scheduler.now_ms), fps=10)
    arena.start()
    arena.start()
    assert scheduler.active_count() == 1
    scheduler.advance(250)
    assert ticks == [100, 200]


def test_stop_without_start_and_double_stop_are_noops(surface, scheduler):
    arena = Arena(surface, scheduler, lambda: None, fps=30)
    arena.stop()
    arena.start()
    assert arena.running
    arena.stop()
    arena.stop()
    assert not arena.running
    assert scheduler.active_count() == 0


def test_clear_covers_whole_surface(surface, scheduler):
    arena = Arena(surface, scheduler, lambda: None, fps=30)
    arena.clear()
    assert surface.calls == [("clear", 0, 0, surface.width, surface.height)]
    assert (arena.width, arena.height) == (surface.width, surface.height)
