from setuptools import setup


setup(
    version="1.0.0",
    name="sanjua",
    description="custom 'sanjua' block for a block-rendering host",
    license="MIT",
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    packages=[
        "sanjua",
        "sanjua.models",
        "sanjua.plugins",
    ],
    package_data={
        "sanjua": ["py.typed"],
    },
)
