"""
BP_Libs - Block Painter Library Modules

This package contains core functionality for the Block Painter project,
organized into specialized sub-packages:

- GeometryLib: Axis-aligned rectangles and their cut/intersect/merge algebra
- CanvasLib: Colors, blocks, operations and the picture they are applied to
- SamplerLib: Target image sampling and similarity scoring
- SearchLib: Brute-force search engines, log evaluation and engine registry
- ProblemStoreLib: Problem loading and solution persistence
"""

__version__ = "0.1.0"
