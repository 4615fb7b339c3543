# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="littlelisp",
    version="0.1.0",
    description="A small Lisp interpreter with closures and macros",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["littlelisp", "littlelisp.*", "littlelisp_lsp", "littlelisp_lsp.*"]),
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "littlelisp=littlelisp.__main__:main",
            "littlelisp-ls=littlelisp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
