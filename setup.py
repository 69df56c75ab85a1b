"""
wellfounded: Well-Founded Recursion for Python

Recursion and induction justified by a decreasing measure:
1. Accessibility certificates and a fold/induction engine over them
2. Well-founded relations with total certificate witnesses
3. Natural-number measures and the certificate construction built on them
4. Trampolined execution for deep descents
"""

from setuptools import setup, find_packages

setup(
    name="wellfounded",
    version="1.0.0",
    description="Well-founded recursion and induction combinators for Python",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="wellfounded developers",
    python_requires=">=3.10",
    packages=find_packages(include=["wellfounded", "wellfounded.*"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
)
