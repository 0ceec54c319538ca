from setuptools import setup, find_packages

setup(
    name="healthtrack",
    version="0.1.0",
    packages=find_packages(include=["healthtrack", "healthtrack.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "alembic",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
        "email-validator",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "healthtrack-server=healthtrack.main:run",
        ],
    },
)
