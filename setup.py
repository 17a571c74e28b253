from setuptools import setup, find_packages

setup(
    name="bintreeviz",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0",
        "graphviz>=0.20",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.8",
    description="draw binary trees (BSTs, heaps, tries) with Graphviz",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
