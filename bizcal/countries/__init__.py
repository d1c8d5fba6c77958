"""Holiday definitions for Argentina, Austria, Australia, Belgium and Brazil."""