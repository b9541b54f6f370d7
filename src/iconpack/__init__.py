"""
iconpack Package.

Generates a React/TypeScript icon component package from SVG sources.

Usage
-----

.. code-block:: python

    import iconpack

    request = iconpack.GenerationRequest(
      images=[iconpack.ImageSource(path="icons/check.svg", source=svg_text)],
      version="1.2.3",
    )
    for out in iconpack.generate(request):
      print(out.filepath)
    # package.json
    # index.ts
    # Box.tsx
    # CheckIcon.tsx

Locating SVG files and writing the results to disk are left to the caller.
"""

from iconpack.config import PackageConfig
from iconpack.core.errors import MalformedInputError
from iconpack.core.generator import PackageGenerator, generate
from iconpack.core.models import GenerationRequest, ImageSource, OutputFile
from iconpack.enums import OutputKind

__version__ = "0.1.0"

__all__ = [
  "GenerationRequest",
  "ImageSource",
  "MalformedInputError",
  "OutputFile",
  "OutputKind",
  "PackageConfig",
  "PackageGenerator",
  "generate",
  "__version__",
]
