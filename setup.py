import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("digitlist/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="digitlist",
    version=version,
    description="Non-negative integers as doubly-linked lists of digits, in any radix.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # radix, base conversion
            # linked list
            # arbitrary precision
    ],
)
