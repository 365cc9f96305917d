from setuptools import setup, find_packages

setup(
    name="quant-toolkit",
    version="0.1.0",
    description="Black-Scholes pricing, Monte Carlo simulation and mean-variance portfolio optimization",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "pandas>=1.3.0",
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "pydantic>=1.8.0"
    ],
    extras_require={
        "test": ["pytest>=7.0"]
    },
    python_requires=">=3.8",
)
