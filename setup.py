from setuptools import setup, find_packages

# defines __version__
exec(open("h1client/_version.py").read())

setup(
    name="h1client",
    version=__version__,
    description=
        "A minimal blocking HTTP/1.1 client with a per-client cookie jar",
    long_description=open("README.rst").read(),
    author="h1client developers",
    license="MIT",
    packages=find_packages(exclude=["h1client.tests"]),
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: System :: Networking",
    ],
)
