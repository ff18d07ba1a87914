from setuptools import setup, find_packages

setup(
    name="proofcraft",
    version="0.1.0",
    description="Natural deduction proof engine for propositional logic",
    author="ProofCraft Contributors",
    author_email="",

    # Find packages in the src/ directory
    packages=find_packages(where="src"),
    package_dir={"": "src"},

    zip_safe=False,
    python_requires=">=3.8",

    install_requires=[
        "lark>=1.1",
        "pyyaml",
        "python-dotenv",
        "tqdm",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
        ],
        "test": [
            "pytest>=6.0",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "proofcraft-run=proofcraft.cli.run:main",
            "proofcraft-repl=proofcraft.cli.repl:main",
        ],
    },
)
