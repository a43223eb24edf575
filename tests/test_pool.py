import threading

from overlayui.pool import ObjectPool


class Item:
    pass


def test_initial_size_prefills_pool():
    pool = ObjectPool(3, Item)
    assert pool.available() == 3
    assert pool.borrowed() == 0


def test_acquire_from_empty_pool_creates_object():
    created = []

    def make():
        item = Item()
        created.append(item)
        return item

    pool = ObjectPool(0, make)
    obj = pool.acquire()
    assert obj is created[0]
    assert pool.borrowed() == 1
    assert pool.available() == 0


def test_release_returns_object_for_reuse():
    pool = ObjectPool(0, Item)
    obj = pool.acquire()
    pool.release(obj)
    assert pool.available() == 1
    assert pool.borrowed() == 0
    assert pool.acquire() is obj


def test_prefilled_objects_come_out_in_order():
    made = []

    def make():
        made.append(Item())
        return made[-1]

    pool = ObjectPool(2, make)
    assert pool.acquire() is made[0]
    assert pool.acquire() is made[1]


def test_release_of_foreign_object_changes_nothing():
    pool = ObjectPool(1, Item)
    pool.release(Item())
    assert pool.available() == 1
    assert pool.borrowed() == 0


def test_release_none_is_ignored():
    pool = ObjectPool(0, Item)
    pool.acquire()
    pool.release(None)
    assert pool.borrowed() == 1


def test_double_release_does_not_duplicate():
    pool = ObjectPool(0, Item)
    obj = pool.acquire()
    pool.release(obj)
    pool.release(obj)
    assert pool.available() == 1


def test_release_all_takes_back_everything():
    pool = ObjectPool(0, Item)
    objs = [pool.acquire() for _ in range(4)]
    pool.release_all()
    assert pool.borrowed() == 0
    assert pool.available() == len(objs)
    again = {id(pool.acquire()) for _ in range(4)}
    assert again == {id(o) for o in objs}


def test_clear_empties_pool():
    pool = ObjectPool(2, Item)
    pool.acquire()
    pool.clear()
    assert pool.available() == 0
    assert pool.borrowed() == 0


def test_default_creator_gives_mutable_objects():
    pool = ObjectPool()
    obj = pool.acquire()
    obj.value = 1
    assert obj.value == 1
    assert pool.acquire() is not obj


def test_concurrent_acquire_and_release_keeps_counts_consistent():
    pool = ObjectPool(0, Item)

    def work():
        for _ in range(200):
            pool.release(pool.acquire())

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert pool.borrowed() == 0
    assert 1 <= pool.available() <= len(threads)