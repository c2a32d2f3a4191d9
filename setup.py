from setuptools import setup, find_packages

setup(
    name="notion-cli",
    version="0.1.0",
    description="Command line client for Notion pages and databases",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=["InquirerPy", "tqdm"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "notion=notion_cli.__main__:main",
        ]
    },
)
