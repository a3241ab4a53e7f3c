''' VizProb Qt user interface '''
