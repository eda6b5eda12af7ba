"""
Sacred Geometry Kernel Source
=============================

Modules:
    sacred_math - Pattern generation kernel (polygon, flower, metatron, ...)
    tests       - Test suite

Requirements (checked on `import sacred_math`):
    Python >= 3.9
    numpy >= 1.20
    scipy >= 1.11
"""
