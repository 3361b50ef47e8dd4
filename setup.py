import setuptools

with open("README.md") as fh:
    long_description = fh.read()

setuptools.setup(
    name="svg_definitions",
    version="0.1.0",
    description="Build, write, and read SVG documents as typed, immutable trees.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    package_data={"svg_definitions": ["py.typed"]},
    packages=setuptools.find_packages("src"),
    install_requires=["lxml", "svg_path_data"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
