# setup.py
from setuptools import setup, find_packages

setup(
    name="kelp",
    version="0.1.0",
    description="A small tree-walking Lisp evaluator",
    packages=find_packages(include=["kelp", "kelp.*"]),
    package_data={"kelp": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kelp=kelp.__main__:main"],
    },
    zip_safe=False,
)
