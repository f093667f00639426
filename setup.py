from setuptools import setup, find_namespace_packages

extras_require = {
    "dev": [
        "beartype>=0.18.0",
        "black==23.3.0",
        "flake8==6.1.0",
        "Flake8-pyproject==1.2.3",
        "isort==5.12.0",
        "mypy==1.5.1",
        "poethepoet==0.22.0",
        "pytest-cov==4.1.0",
        "pytest-subtests==0.11.0",
        "pytest>=8.2.0",
    ],
}

setup(
    name="policydesk-pythonlib-util",
    packages=find_namespace_packages(where="src"),
    version="0.1.0",
    package_dir={"": "src"},
    package_data={
        "policydesk.util": ["py.typed"],
        "policydesk.service": ["py.typed"],
        "policydesk.cli": ["py.typed"],
    },
    description="Policydesk Util Library",
    install_requires=[
        "sentry-sdk>=1.39.1",
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.3.0,<3.0.0",
        "python-stdnum>=1.19",
    ],
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "policydesk-check-id=policydesk.cli.check_id:main",
        ],
    },
    test_suite="tests",
)
