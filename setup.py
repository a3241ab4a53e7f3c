from setuptools import setup

version = {}
with open('vizprob/version.py', 'r') as f:
    exec(f.read(), version)

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name='vizprob',
    version=version['__version__'],
    description='Probability distribution visualizer',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.19',
        'matplotlib>=3.5',
        'scipy>=1.5',
        'pyyaml>=5.4',
        'pyqt6',
        ],
    extras_require={'test': ['pytest']},
    packages=['vizprob', 'vizprob.gui', 'vizprob.gui.widgets'],
    entry_points={
        'gui_scripts': ['vizprob = vizprob.gui.__main__:main'],
        },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        ]
    )
