"""Setup for Diabetes Risk Decision Support."""

from setuptools import setup, find_packages

setup(
    name="diabetes_risk_dss",
    version="0.1.0",
    description="Logistic-regression diabetes risk estimation with an interactive Streamlit form",
    long_description=open("README.md", encoding="utf-8").read() if __import__("pathlib").Path("README.md").exists() else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "data*"]),
    python_requires=">=3.10",
    install_requires=[
        "streamlit>=1.50.0",
        "pydantic>=2.0.0",
        "plotly>=5.18.0",
        "pandas>=2.0.0",
        "numpy>=1.24",
        "scikit-learn>=1.3",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "diabetes-risk-evaluate=pipeline.report:main",
        ],
    },
)
