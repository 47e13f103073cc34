from setuptools import find_packages, setup

setup(
    name="pagerduty-events",
    version="0.1.0",
    license="Apache License 2.0",

    python_requires=">=3.12",
    description="Client library for the PagerDuty Events API v2: build "
                "trigger, acknowledge and resolve events and deliver them "
                "over HTTPS.",

    packages=find_packages(exclude=('tests', 'tests.*')),

    install_requires=[
        "httpx>=0.28,<1.0",
        "pydantic>=2.7,<3.0",
        "structlog>=24.1",
        "prometheus-client>=0.20",
    ],

    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },

    test_suite="tests",

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
    ],
)
