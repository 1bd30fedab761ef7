import threading

from puzzlebox.collage.progress import Progress


def test_inc_counts_without_reporting():
    calls = []
    progress = Progress(100, lambda cur, mx: calls.append((cur, mx)))
    steps = 5
    for _ in range(steps):
        progress.inc()
    assert progress.current == steps
    assert calls == []


def test_reports_at_mask():
    calls = []
    progress = Progress(100, lambda cur, mx: calls.append((cur, mx)))
    progress.current = 0xFFFFFF - 1
    progress.inc()
    assert calls == [(0xFFFFFF, 100)]
    progress.inc()
    assert len(calls) == 1


def test_concurrent_increments():
    progress = Progress(0, lambda cur, mx: None)
    threads_count, per_thread = 4, 1000

    def work():
        for _ in range(per_thread):
            progress.inc()

    threads = [threading.Thread(target=work) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert progress.current == threads_count * per_thread