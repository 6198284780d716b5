import setuptools

install_requires = [
    "Flask>=2.2",
    "Werkzeug",
    "Flask-SQLAlchemy>=3.0",
    "SQLAlchemy>=1.4",
    "requests",
    "PyYAML",
]

tests_require = [
    "pytest",
    "pytest-xdist",
]

dev_requires = tests_require + [
    # For coverage
    "coverage",
    "pytest-cov",
    # Static code analysis
    "flake8",
    "nox",
]


def get_long_description():
    with open("README.rst") as fd:
        return fd.read()


setuptools.setup(
    # Metadata
    name="casesearch",
    version="0.1.0.dev0",
    license="Apache-2.0",
    description="Tag management for documents of cases indexed in Solr",
    long_description=get_long_description(),
    long_description_content_type="text/x-rst",
    platforms="any",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Framework :: Flask",
    ],
    # Data
    packages=setuptools.find_packages(include=["casesearch", "casesearch.*"]),
    package_data={"casesearch": ["core/*.yml"]},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
    # Requirements & dependencies
    install_requires=install_requires,
    extras_require={
        "tests": tests_require,
        "dev": dev_requires,
    },
)
