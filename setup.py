from setuptools import find_packages, setup
from version import get_version

# fetch the package version, overridable through PACKAGE_VERSION
build_version = get_version()

# use the contents of the README file as the 'long description' for the package
with open("./README.md", "r") as fh:
    long_description = fh.read()

#
# build the package
#
setup(
    name="allen-ranges",
    version=build_version,
    description="Continuous range algebra with exact inclusive/exclusive and unbounded endpoints",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where=".", include=["ranges", "ranges.*"]),
    python_requires=">=3.9",
    install_requires=["numpy", "pandas"],
    extras_require=dict(tests=["pytest"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
