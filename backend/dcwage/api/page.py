"""Static estimator page served for every path other than the wage API."""

from __future__ import annotations

PAGE_TITLE = "Data Center Contractor Wage Estimator"

# The script calls the wage API with GET and renders either the wage or the
# error message from the JSON body.
ESTIMATOR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Data Center Contractor Wage Estimator</title>
  <style>
    body {
      font-family: Arial, sans-serif;
      max-width: 600px;
      margin: 0 auto;
      padding: 20px;
      line-height: 1.6;
    }
    input, button {
      width: 100%;
      padding: 10px;
      margin: 10px 0;
    }
    #result {
      margin-top: 20px;
      padding: 15px;
      background-color: #f4f4f4;
      border-radius: 5px;
    }
  </style>
</head>
<body>
  <h1>Data Center Contractor Wage Estimator</h1>
  <input type="text" id="locationInput" placeholder="Enter location (e.g., San Francisco, Austin)">
  <button onclick="estimateWage()">Estimate Wage</button>
  <div id="result"></div>

  <script>
    async function estimateWage() {
      const location = document.getElementById('locationInput').value;
      const resultDiv = document.getElementById('result');

      try {
        const response = await fetch('/api/wage?location=' + encodeURIComponent(location), {
          method: 'GET'
        });

        const data = await response.json();

        if (data.hourlyWage) {
          resultDiv.innerHTML = `
            <strong>Location:</strong> ${data.location}<br>
            <strong>Hourly Wage:</strong> $${data.hourlyWage.toFixed(2)} ${data.currency}
          `;
          resultDiv.style.color = 'green';
        } else {
          resultDiv.innerHTML = data.message;
          resultDiv.style.color = 'red';
        }
      } catch (error) {
        resultDiv.innerHTML = 'Error fetching wage data';
        resultDiv.style.color = 'red';
      }
    }
  </script>
</body>
</html>
"""
