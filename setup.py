from setuptools import setup, find_packages

setup(
    name="lotto_fallback",
    version="0.3.0",
    description="Offline frequency-based lottery number generator",
    author="Lottery Prediction Team",
    author_email="info@lotteryprediction.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # Core packages
        "numpy>=1.21.0",
        "pandas>=1.3.0",
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "lottery-predict=lotto_fallback.scripts.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Games/Entertainment",
    ],
)
