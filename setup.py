"""Install the Cedar local agent."""

from setuptools import setup, find_packages

setup(
    name='cedar-agent',
    version='0.1.0',
    packages=find_packages(include=['cedar_agent', 'cedar_agent.*']),
    python_requires='>=3.8',
    install_requires=[
        "flask>=2.2",
        "werkzeug>=2.2",
        "cedarpy>=4.12",
        "python-json-logger>=2.0,<4"
    ],
    extras_require={
        'test': ["pytest"]
    },
    entry_points={
        'console_scripts': ['cedar-agent=cedar_agent.__main__:main']
    },
    zip_safe=False
)
