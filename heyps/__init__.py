"""heyps package: run Adobe scripts in a chosen installed version of Photoshop, Illustrator or After Effects.

Import from the submodules (heyps.cli, heyps.entities, heyps.adapters, ...); nothing is re-exported here.
"""

__all__: list[str] = []
