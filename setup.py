from setuptools import setup, find_packages

# Load the s3region version info.
#
# Note that we cannot simply import the module, since dependencies listed
# in setup() will very likely not be installed yet when setup.py run.
#
# See:
#   https://packaging.python.org/guides/single-sourcing-package-version

__version__ = None

with open("s3region/_version.py") as fp:
    exec(fp.read())

version = __version__

tests_require = [
    "pytest",
]

setup(
    name="s3region",
    version=version,
    description="Resolve object storage region names to scheme, host and display name.",
    long_description="Resolve object storage region names (AWS S3, DigitalOcean Spaces or custom endpoints) to scheme, host and display name.",
    packages=find_packages(include=["s3region*"]),
    include_package_data=True,
    python_requires=">=3.8",
    tests_require=tests_require,
    install_requires=[
        "attrs>=23.1.0",
    ],
    extras_require={
        "dev": tests_require,
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
    ],
)
