import pytest

from algokata.structures import QueueStack, StackQueue


def test_queue_stack_is_lifo():
    stack = QueueStack()
    for value in [1, 2, 3, 4]:
        stack.push(value)
    assert [stack.pop() for _ in range(4)] == [4, 3, 2, 1]
    assert stack.empty() is True


def test_queue_stack_top_does_not_remove():
    stack = QueueStack()
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert stack.top() == 2
    assert len(stack) == 2
    assert stack.empty() is False


def test_queue_stack_interleaved_operations():
    stack = QueueStack()
    stack.push(5)
    stack.push(7)
    assert stack.top() == 7
    assert stack.pop() == 7
    assert stack.top() == 5
    assert stack.empty() is False
    stack.push(9)
    stack.push(11)
    assert stack.pop() == 11
    assert stack.top() == 9
    stack.push(13)
    assert stack.pop() == 13
    assert stack.pop() == 9
    assert stack.top() == 5
    assert stack.pop() == 5
    assert stack.empty() is True


def test_queue_stack_empty_errors():
    stack = QueueStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_stack_queue_is_fifo():
    queue = StackQueue()
    for value in [1, 2, 3, 4]:
        queue.push(value)
    assert [queue.pop() for _ in range(4)] == [1, 2, 3, 4]
    assert queue.empty() is True


def test_stack_queue_peek_does_not_remove():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.peek() == 1
    assert len(queue) == 2


def test_stack_queue_interleaved_operations():
    queue = StackQueue()
    queue.push(5)
    queue.push(7)
    assert queue.peek() == 5
    assert queue.pop() == 5
    assert queue.peek() == 7
    assert queue.empty() is False
    queue.push(9)
    queue.push(11)
    assert queue.pop() == 7
    assert queue.peek() == 9
    queue.push(13)
    assert queue.pop() == 9
    assert queue.pop() == 11
    assert queue.peek() == 13
    assert queue.pop() == 13
    assert queue.empty() is True


def test_stack_queue_empty_errors():
    queue = StackQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()