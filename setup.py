from setuptools import setup, find_packages

setup(
    name="ravendb-commands",
    packages=find_packages(exclude=["*.tests.*", "tests", "*.tests", "tests.*"]),
    version="4.0.0",
    long_description_content_type="text/markdown",
    long_description=open("README.md").read(),
    description="Command layer of a Python client for RavenDB NoSQL Database",
    author="RavenDB",
    author_email="support@ravendb.net",
    url="https://github.com/ravendb/ravendb-python-client",
    license="MIT",
    keywords=[
        "ravendb",
        "nosql",
        "database",
        "commands",
    ],
    python_requires="~=3.7",
    install_requires=[
        "requests >= 2.27.1",
        "requests-pkcs12 >= 1.13",
        "pyOpenSSL >= 22.0.0",
    ],
    zip_safe=False,
)
