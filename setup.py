# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A minimal Lisp-family expression evaluator with S- and Q-expressions",
    packages=find_packages(include=["lispy", "lispy.*", "lispy_lsp", "lispy_lsp.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "lispy=lispy.repl:main",
            "lispy-ls=lispy_lsp.server:main",
        ],
    },
    zip_safe=False,
)
