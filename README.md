# threadcraft

Small helpers for working with threads, plus a set of argument checks.

## Modules

### `threadcraft.thread_owner`

- `JoiningThread(target=None, *args)` starts `target(*args)` on a new thread
  and owns it. The thread is joined by `close()` and when a `with` block ends.
  `assign(other)` joins the thread it owns, then takes over the thread of
  `other`. After that, `other` owns nothing.
  - `JoiningThread.from_thread(thread)` takes ownership of an existing
    `threading.Thread`. It starts the thread first if it has not been started.
  - `swap(other)` exchanges the owned threads.
  - `ident()` returns the thread identifier, or `None` when nothing is owned.
  - `joinable()` is true while a thread is owned.
  - `join()` waits for the owned thread and then releases it.
  - `detach()` releases the owned thread without waiting.
  - Both `join()` and `detach()` raise `RuntimeError` when nothing is owned.
  - `as_thread()` returns the owned `threading.Thread`, or `None`.
- `accumulate_block(items, init)` folds `items` onto `init` with `+`.
- `parallel_accumulate(items, init)` works on a sized, sliceable sequence.
  - It splits the sequence into blocks of at least 25 elements.
  - It uses no more threads than `os.cpu_count()` reports, or two when that
    count is unknown.
  - The last block runs in the calling thread.
  - Block results are combined in order, so a `+` that depends on order keeps
    its order.
  - An empty sequence returns `init` unchanged.
- Demonstrations:
  - `param_function(i, repeats=10, delay=1.0)`
  - `some_function(stop=None)` / `some_other_function(stop=None)` sleep until
    the given `threading.Event` is set. Without an event they sleep forever.
  - `use_vector(repeats=10, delay=1.0)` runs ten threads.
  - `use_jointhread(maxindex=10, delay=1.0)`
  - `use_parallel_acc()` sums ten thousand zeros followed by `0..9999`, then
    prints the sum and returns it.
- `main(argv=None)` runs `use_parallel_acc()`.

### `threadcraft.basic`

- `thread_work(text)` prints `Thread: <text>`.
- `ThreadFunctor()` is a callable that prints a background-task message.
- `Func(state, delay=1.0)` is a callable that writes `0`, `1` and `2` into
  `state[0]` in turn. It prints each value and sleeps between them.
- `oops()` starts a daemon thread running `Func` on a local cell and returns
  the thread.

### `threadcraft.utils`

- Checks that raise `ValueError` on failure:
  - `require_non_null(obj)` returns `obj`.
  - `should_be_positive(val)`
  - `length_should_be(text, minimum, maximum)`
  - `val_should_bigger(val, minimum)`
  - `val_should_be(val, minimum, maximum)`
  - `size_should_be(items, val)`
  - `size_should_bigger(items, val)`
  - `size_should_smaller(items, val)`
  - `array_should_not_be_empty(items)`
- List helpers:
  - `remove_object(items, target)` and `delete_val(val, items)` return a new
    list without the elements that are the given object. They test identity,
    not equality.
  - `set_to_list(items)` returns the items as a list.
- Input:
  - `handle_input(minimum, maximum, stream=None, out=None)` prompts until it
    reads an integer in range.
  - `input_multiple_nums(stream=None)` reads the first non-empty line. It
    returns the integers at the start of that line, sorted and without
    duplicates.
  - Both read from standard input by default and raise `EOFError` when the
    input runs out.
- `to_string(value)` formats a value:
  - booleans as `1`/`0`
  - floats in `%g` style
  - sequences as `[a , b , c]`

## Install

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Usage

```python
from threadcraft.thread_owner import JoiningThread, parallel_accumulate

print(parallel_accumulate(range(10000), 0))  # 49995000

results = []
with JoiningThread(results.append, 42):
    pass
print(results)  # [42]
```

## Command line

```
threadcraft
```

The command runs `use_parallel_acc()` and prints `sum is 49995000`.