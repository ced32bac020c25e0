import threading

from simpledb.txnum import TxNumberGenerator, default_generator


def test_first_number_is_one():
    assert TxNumberGenerator().next() == 1


def test_numbers_increase_by_one():
    gen = TxNumberGenerator()
    first = gen.next()
    second = gen.next()
    assert second == first + 1


def test_default_generator_is_shared():
    first_handle = default_generator()
    second_handle = default_generator()
    first = first_handle.next()
    assert second_handle.next() == first + 1


def test_default_generator_keeps_counting():
    gen = default_generator()
    first = gen.next()
    assert default_generator().next() == first + 1


def test_numbers_unique_across_threads():
    gen = TxNumberGenerator()
    results = []
    lock = threading.Lock()

    def worker():
        local = [gen.next() for _ in range(100)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(results) == list(range(1, 801))
    assert gen.next() == 801