import os

from setuptools import setup, find_packages, Extension

# STRINGMATCH_CYTHONIZE=1 compiles the rolling hash module (needs Cython and a C compiler)
extensions = []
if os.environ.get("STRINGMATCH_CYTHONIZE") == "1":
    from Cython.Build import cythonize
    import numpy as np

    extensions = cythonize(
        [
            Extension(
                name="stringmatch.hashing.hash",        # full dotted module path
                sources=["stringmatch/hashing/hash.py"],
                include_dirs=[np.get_include()],
            ),
        ],
        compiler_directives={"language_level": "3"},
    )

setup(
    name="stringmatch",
    version="0.1.0",
    description="Exact string matching: KMP, Boyer-Moore and Rabin-Karp",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
        "speedups": ["Cython"],
    },
    ext_modules=extensions,
    zip_safe=False,
)
