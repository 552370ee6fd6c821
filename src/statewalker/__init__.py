"""statewalker - Run configured executables for a target based on its state transition."""

from .context import ExecutionContext as ExecutionContext
from .errors import AlreadyInitializedError as AlreadyInitializedError
from .errors import StateExecuteError as StateExecuteError
from .errors import StateWalkerError as StateWalkerError
from .executable import Executable as Executable
from .executable import ExecutableTemplate as ExecutableTemplate
from .hcl import ConfigLoader as ConfigLoader
from .noop import NoOpExecutable as NoOpExecutable
from .pipeline import finalize_run as finalize_run
from .pipeline import has_error as has_error
from .pipeline import run as run
from .registry import executable as executable
from .registry import instantiate as instantiate
from .registry import register_executable as register_executable
from .states import DEFAULT_STATE as DEFAULT_STATE
from .states import NO_TRANSITION_STATE as NO_TRANSITION_STATE
from .states import Registry as Registry
from .walker import StateWalker as StateWalker
