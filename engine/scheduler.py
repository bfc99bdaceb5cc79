"""
Cancellable scheduled tasks for the TicTacToe engine.

The AI "thinks" for a short delay before playing. The delayed move is a
ScheduledTask handle that can be cancelled when the game is reset, so a
stale move never lands on a new board.

Two schedulers are provided:
- ManualScheduler: a deterministic clock driven by the caller
  (tests, console mode)
- TkScheduler: wraps a Tkinter widget's after() / after_cancel()
"""

from typing import Callable, List, Optional


class ScheduledTask:
    """A handle for a callback that will run later, unless cancelled."""
    
    def __init__(self, callback: Callable[[], None], due_ms: int):
        self.callback = callback
        self.due_ms = due_ms
        self.cancelled = False
        self.done = False
        
        # Set by the scheduler that owns the task
        self._on_cancel: Optional[Callable[[], None]] = None
    
    @property
    def pending(self) -> bool:
        """True until the task has run or been cancelled."""
        return not (self.cancelled or self.done)
    
    def cancel(self):
        """Prevent the callback from running. Safe to call more than once."""
        if not self.pending:
            return
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
    
    def run(self):
        """Run the callback if the task is still pending."""
        if not self.pending:
            return
        self.done = True
        self.callback()
    
    def __repr__(self) -> str:
        state = "pending" if self.pending else ("cancelled" if self.cancelled else "done")
        return f"ScheduledTask(due_ms={self.due_ms}, {state})"


class Scheduler:
    """Base class: schedule a callback after a delay."""
    
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Scheduler with a simulated clock.
    
    Nothing runs until the owner calls advance() or run_pending(), so
    everything happens on the caller's thread in a predictable order.
    """
    
    def __init__(self):
        self.now_ms = 0
        self._tasks: List[ScheduledTask] = []
    
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(callback, self.now_ms + max(0, delay_ms))
        task._on_cancel = lambda: self._discard(task)
        self._tasks.append(task)
        return task
    
    def _discard(self, task: ScheduledTask):
        if task in self._tasks:
            self._tasks.remove(task)
    
    @property
    def pending_count(self) -> int:
        """Number of tasks waiting to run."""
        return len(self._tasks)
    
    def next_delay(self) -> Optional[int]:
        """Milliseconds until the next task is due, or None if idle."""
        if not self._tasks:
            return None
        return max(0, min(task.due_ms for task in self._tasks) - self.now_ms)
    
    def advance(self, ms: int) -> int:
        """
        Move the clock forward and run every task that falls due.
        
        Args:
            ms: Milliseconds to advance.
            
        Returns:
            Number of tasks that ran.
        """
        target = self.now_ms + ms
        ran = 0
        
        while True:
            due = [task for task in self._tasks if task.due_ms <= target]
            if not due:
                break
            # Earliest first; ties keep scheduling order (min is stable)
            task = min(due, key=lambda t: t.due_ms)
            self._tasks.remove(task)
            self.now_ms = max(self.now_ms, task.due_ms)
            task.run()
            ran += 1
        
        self.now_ms = target
        return ran
    
    def run_pending(self) -> int:
        """Run every pending task, jumping the clock as far as needed."""
        ran = 0
        while self._tasks:
            ran += self.advance(self.next_delay())
        return ran


class TkScheduler(Scheduler):
    """Scheduler backed by the Tkinter event loop."""
    
    def __init__(self, widget):
        """
        Args:
            widget: Any Tk widget (usually the root window).
        """
        self.widget = widget
    
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(callback, delay_ms)
        after_id = self.widget.after(delay_ms, task.run)
        task._on_cancel = lambda: self.widget.after_cancel(after_id)
        return task
