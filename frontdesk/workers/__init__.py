"""Timers driving the temporal UI state."""

from .timers import AsyncioScheduler, Scheduler, TimerHandle, TimerSlot

__all__ = ["AsyncioScheduler", "Scheduler", "TimerHandle", "TimerSlot"]
