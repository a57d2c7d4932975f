from interview_drills.counter import create_increment


def test_first_call_returns_one():
    increment = create_increment()
    assert increment() == 1


def test_increments_by_one():
    increment = create_increment()
    assert [increment() for _ in range(5)] == [1, 2, 3, 4, 5]


def test_many_calls():
    increment = create_increment()
    for expected in range(1, 101):
        assert increment() == expected


def test_returns_callable():
    assert callable(create_increment())


def test_interleaved_instances_are_independent():
    increment1 = create_increment()
    increment2 = create_increment()

    assert increment1() == 1
    assert increment1() == 2
    assert increment2() == 1
    assert increment2() == 2
    assert increment1() == 3
    assert increment2() == 3


def test_instance_created_later_starts_fresh():
    increment1 = create_increment()
    increment1()
    increment1()

    increment2 = create_increment()
    assert increment2() == 1
    assert increment1() == 3
    assert increment2() == 2


def test_state_not_exposed_on_function():
    increment = create_increment()
    increment()
    assert increment.__dict__ == {}
