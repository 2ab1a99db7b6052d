"""Configuration class for registering blocks with a host."""

import sys
import importlib.metadata

from sanjua.plugins import BlockPlugin, SanjuaBlock


# pylint: disable=invalid-name


class AppConfig:
    """
    Configuration class listing the blocks that are provided to the
    host.

    Subclass and override `SUPPORTED_BLOCKS` to change the set of
    registered blocks.
    """

    SUPPORTED_BLOCKS: list[type[BlockPlugin]] = [SanjuaBlock]

    def __init__(self) -> None:
        self.blocks = self.load_blocks()
        self.CONTAINER_SELF_DESCRIPTION = {}
        self.set_identity()

    def load_blocks(self) -> dict[str, BlockPlugin]:
        """
        Returns mapping of block id and block-plugin instance for all
        `SUPPORTED_BLOCKS`.
        """
        blocks: dict[str, BlockPlugin] = {}
        for block in self.SUPPORTED_BLOCKS:
            if not isinstance(block, type) or not issubclass(
                block, BlockPlugin
            ):
                raise TypeError(
                    f"Bad block '{block}' (expected subclass of "
                    + f"'{BlockPlugin.__name__}')."
                )
            if block.id in blocks:
                raise ValueError(
                    f"Conflicting block id '{block.id}' "
                    + f"('{blocks[block.id].__class__.__name__}' and "
                    + f"'{block.__name__}')."
                )
            blocks[block.id] = block()
        return blocks

    def set_identity(self) -> None:
        """
        Load dictionary with self-description based on current settings.

        When inheriting from this config-class with a custom
        self-description, the `set_identity`-default can be loaded with
        `super().set_identity()`.
        """
        try:
            app_version = importlib.metadata.version("sanjua")
        except importlib.metadata.PackageNotFoundError:
            app_version = None
        self.CONTAINER_SELF_DESCRIPTION = {
            "description": "Provides custom blocks.",
            "version": {
                "app": app_version,
                "python": sys.version,
                "lib": {
                    lib.name: lib.version
                    for lib in importlib.metadata.distributions()
                },
            },
            "configuration": {
                "blocks": {
                    id_: block.json for id_, block in self.blocks.items()
                },
            },
        }
