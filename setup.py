# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='simple_predicates',
    version='0.4.3',
    description="Boolean expressions over user-defined literals and their conjunctive and "
                "disjunctive normal forms",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=['tests', 'tests.*']
    ),
    python_requires='>=3.11',
    install_requires=[
        'ipython',
        'sympy',
        'typing_extensions'
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
