from setuptools import setup, find_packages

setup(
    name="iris_news",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"iris_news": ["config.yaml"]},
    install_requires=[
        "scrapy",
        "httpx",
        "pydantic",
        "pyyaml",
        "python-dotenv",
        "python-dateutil",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
