"""Application context for explicit state passing.

This module provides the AppContext dataclass that carries all application
state (configuration, the track store and the console) to every command
handler, instead of module-level globals.
"""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from track_bench.core.config import Config
from track_bench.domain.tracks.store import TrackStore, create_store


@dataclass
class AppContext:
    """Application context passed to all command handlers.

    The store is mutated in place by load, sort, filter and removal commands.

    Attributes:
        config: Application configuration
        store: The single track collection, owned by the shell
        console: Rich Console for formatted output
    """

    config: Config
    store: TrackStore
    console: Console = field(default_factory=Console)

    @classmethod
    def create(
        cls,
        config: Config,
        backend: Optional[str] = None,
        console: Optional[Console] = None,
    ) -> 'AppContext':
        """Create initial application context.

        Args:
            config: Application configuration
            backend: Store backend name; defaults to the configured one
            console: Rich Console to share; a new one when omitted

        Returns:
            New AppContext with an empty store
        """
        return cls(
            config=config,
            store=create_store(backend or config.store.backend),
            console=console or Console(),
        )

    @property
    def backend_label(self) -> str:
        return self.store.label
