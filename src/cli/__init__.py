"""Console front end for the contact book."""
