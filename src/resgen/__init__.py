"""resgen package

Generates the Android and iOS app icon and splash screen image sets from
one or more source images. The catalog of required images lives in
:mod:`resgen.catalog`; :func:`resgen.platform.run` generates one platform and
:func:`resgen.api.generate_resources` drives a whole run.
"""

from ._version import __version__  # noqa: F401

__all__ = ["__version__"]
